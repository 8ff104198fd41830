import logging
import math
from functools import singledispatch

from .api import (
    brackets,
    braces,
    combine_h,
    hcat,
    indent,
    mparens,
    parens,
    punctuate,
    text,
    vcat,
    EMPTY,
    SPACE,
)
from .identifiers import (
    escapes,
    local_name,
    variable_name,
)
from .render import render
from .syntax import (
    Apply,
    Array,
    BinOp,
    Char,
    Comment,
    Const,
    Double,
    Export,
    Global,
    GlobalId,
    If,
    Integer,
    Lambda,
    Local,
    LocalId,
    Lookup,
    MemberId,
    MemberIndex,
    Module,
    Null,
    Object,
    PlainJS,
    PreOp,
    Self,
    String,
    Undefined,
    global_ids,
)

logger = logging.getLogger(__name__)

COMMA = text(',')
COLON = text(':')
SEMICOLON = text(';')
QUOTE = text('"')
ARROW = text('=>')
ASSIGN = text('=')

RTS_NAME = 'agdaRTS'
RTS_MODULE = 'agda-rts'


class PrettyContext:
    """State threaded through the printer.

    ``depth`` is the number of binders enclosing the expression
    being printed, used to name de Bruijn indices. ``minify`` drops
    comments."""
    __slots__ = (
        'depth',
        'minify',
    )

    def __init__(self, depth=0, minify=False):
        self.depth = depth
        self.minify = minify

    def _replace(self, **kwargs):
        passed_keys = set(kwargs.keys())
        fieldnames = type(self).__slots__
        assert passed_keys.issubset(set(fieldnames))
        return PrettyContext(
            **{
                k: (
                    kwargs[k]
                    if k in passed_keys
                    else getattr(self, k)
                )
                for k in fieldnames
            }
        )

    def bind(self, n):
        return self._replace(depth=self.depth + n)


def _pretty_unknown(value, ctx):
    raise TypeError(
        f'No JavaScript printer registered for {type(value).__name__}: '
        f'{repr(value)}'
    )


pretty_js = singledispatch(_pretty_unknown)


def register_pretty(_type):
    def decorator(fn):
        pretty_js.register(_type, fn)
        return fn
    return decorator


def quoted(s):
    return hcat([QUOTE, escapes(s), QUOTE])


def pretty_all(values, ctx):
    return [pretty_js(value, ctx) for value in values]


@register_pretty(LocalId)
def pretty_local_id(value, ctx):
    return text(local_name(ctx.depth, value.index))


@register_pretty(GlobalId)
def pretty_global_id(value, ctx):
    return text(variable_name('_'.join(value.parts)))


@register_pretty(MemberId)
def pretty_member_id(value, ctx):
    return quoted(value.name)


@register_pretty(MemberIndex)
def pretty_member_index(value, ctx):
    return combine_h(text(str(value.index)), pretty_js(value.comment, ctx))


@register_pretty(Comment)
def pretty_comment(value, ctx):
    if not value.text or ctx.minify:
        return EMPTY
    return text(f'/* {value.text} */')


@register_pretty(Self)
def pretty_self(value, ctx):
    return text('exports')


@register_pretty(Undefined)
def pretty_undefined(value, ctx):
    return text('undefined')


@register_pretty(Null)
def pretty_null(value, ctx):
    return text('null')


@register_pretty(Local)
@register_pretty(Global)
def pretty_variable(value, ctx):
    return pretty_js(value.id, ctx)


@register_pretty(String)
@register_pretty(Char)
def pretty_string(value, ctx):
    return quoted(value.value)


@register_pretty(Integer)
def pretty_integer(value, ctx):
    return hcat([
        f'{RTS_NAME}.primIntegerFromString("',
        str(value.value),
        '")',
    ])


INF_FLOAT = float('inf')
NEG_INF_FLOAT = float('-inf')


@register_pretty(Double)
def pretty_double(value, ctx):
    if value.value == INF_FLOAT:
        return text('Infinity')
    elif value.value == NEG_INF_FLOAT:
        return text('-Infinity')
    elif math.isnan(value.value):
        return text('NaN')
    return text(repr(value.value))


def block(exp, ctx):
    """Function bodies that are object literals need parentheses,
    otherwise the braces would start a statement block."""
    return mparens(isinstance(exp, Object), pretty_js(exp, ctx))


@register_pretty(Lambda)
def pretty_lambda(value, ctx):
    body_ctx = ctx.bind(value.arity)
    params = [
        pretty_js(LocalId(index), body_ctx)
        for index in reversed(range(value.arity))
    ]
    return hcat([
        mparens(value.arity != 1, punctuate(COMMA, params)),
        SPACE,
        ARROW,
        SPACE,
        block(value.body, body_ctx),
    ])


def pretty_member(member, exp, ctx):
    return hcat([
        pretty_js(member, ctx),
        COLON,
        SPACE,
        pretty_js(exp, ctx),
    ])


@register_pretty(Object)
def pretty_object(value, ctx):
    return braces(punctuate(COMMA, [
        pretty_member(member, value.members[member], ctx)
        for member in sorted(value.members)
    ]))


@register_pretty(Array)
def pretty_array(value, ctx):
    return brackets(punctuate(COMMA, [
        combine_h(pretty_js(comment, ctx), pretty_js(exp, ctx))
        for comment, exp in value.elements
    ]))


@register_pretty(Apply)
def pretty_apply(value, ctx):
    return combine_h(
        pretty_js(value.fn, ctx),
        parens(punctuate(COMMA, pretty_all(value.args, ctx)))
    )


@register_pretty(Lookup)
def pretty_lookup(value, ctx):
    return combine_h(
        pretty_js(value.exp, ctx),
        brackets(pretty_js(value.member, ctx))
    )


@register_pretty(If)
def pretty_if(value, ctx):
    return parens(hcat([
        pretty_js(value.cond, ctx),
        '?',
        SPACE,
        pretty_js(value.then, ctx),
        COLON,
        SPACE,
        pretty_js(value.otherwise, ctx),
    ]))


@register_pretty(PreOp)
def pretty_preop(value, ctx):
    return parens(hcat([value.op, ' ', pretty_js(value.exp, ctx)]))


@register_pretty(BinOp)
def pretty_binop(value, ctx):
    return parens(hcat([
        pretty_js(value.left, ctx),
        ' ',
        value.op,
        ' ',
        pretty_js(value.right, ctx),
    ]))


@register_pretty(Const)
def pretty_const(value, ctx):
    return text(value.value)


@register_pretty(PlainJS)
def pretty_plain_js(value, ctx):
    return text(value.code)


def member_path(path, ctx):
    return hcat(brackets(pretty_js(member, ctx)) for member in path)


def assignment(target, exp, ctx):
    return hcat([
        target,
        SPACE,
        ASSIGN,
        SPACE,
        indent(pretty_js(exp, ctx)),
        SEMICOLON,
    ])


def pretty_exports(exports, ctx):
    """Assigns every export to its path under ``exports``.

    A path can only be assigned once its parent path exists, so
    missing parents are defined as empty objects first."""
    defined = {()}
    pending = list(reversed(exports))
    docs = []

    while pending:
        export = pending.pop()
        parent = export.path[:-1]
        if parent in defined:
            docs.append(assignment(
                combine_h('exports', member_path(export.path, ctx)),
                export.exp,
                ctx,
            ))
            defined.add(export.path)
        else:
            logger.debug('Defining missing export parent %r', parent)
            pending.append(export)
            pending.append(Export(parent, Object()))

    return vcat(docs)


def pretty_global_exports(pairs, ctx):
    """Lays out ``(GlobalId, Export)`` pairs as assignments to the
    export paths of other modules."""
    return vcat(
        assignment(
            combine_h(
                pretty_js(global_id, ctx),
                member_path(export.path, ctx)
            ),
            export.exp,
            ctx,
        )
        for global_id, export in pairs
    )


def module_name(global_id):
    return text('"' + '.'.join(global_id.parts) + '"')


def require(name, module):
    return hcat([
        'var ',
        indent(name),
        SPACE,
        ASSIGN,
        SPACE,
        'require(',
        module,
        ');',
    ])


@register_pretty(Module)
def pretty_module(value, ctx):
    required = sorted(set(global_ids(value.exports)) | set(value.imports))

    imports = vcat([
        hcat([
            f'var {RTS_NAME}',
            SPACE,
            ASSIGN,
            SPACE,
            f'require("{RTS_MODULE}");',
        ]),
        *(
            require(pretty_js(global_id, ctx), module_name(global_id))
            for global_id in required
        ),
    ])

    if value.call_main is None:
        main = EMPTY
    else:
        main = pretty_js(value.call_main, ctx)

    return vcat([
        imports,
        pretty_exports(value.exports, ctx),
        main,
    ])


def pretty_show(minify, value):
    """Returns the JavaScript source text for the syntax tree ``value``."""
    doc = pretty_js(value, PrettyContext(depth=0, minify=minify))
    return render(minify, doc)
