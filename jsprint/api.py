from .doc import (
    Above,
    Beside,
    Doc,
    Enclose,
    Group,
    Indent,
    Nil,
    Text,
    EMPTY,
    SPACE,
)

INDENT_WIDTH = 2


def text(x):
    return Text(x)


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return EMPTY
        return Text(doc)

    raise ValueError(doc)


def space():
    return SPACE


def group(doc):
    """Marks ``doc`` as eligible for compaction: if all of its
    lines together are shorter than the compaction threshold,
    they are laid out on a single line."""
    return Group(cast_doc(doc))


def combine_h(left, right):
    """Places ``right`` beside ``left``. The last line of ``left``
    and the first line of ``right`` end up on the same line."""
    left, right = cast_doc(left), cast_doc(right)
    if isinstance(left, Nil):
        return right
    if isinstance(right, Nil):
        return left
    return Beside(left, right)


def combine_v(top, bottom):
    """Stacks ``bottom`` below ``top``."""
    top, bottom = cast_doc(top), cast_doc(bottom)
    if isinstance(top, Nil):
        return bottom
    if isinstance(bottom, Nil):
        return top
    return Above(top, bottom)


def hcat(docs):
    result = EMPTY
    for doc in reversed(list(docs)):
        result = combine_h(doc, result)
    return result


def vcat(docs):
    result = EMPTY
    for doc in reversed(list(docs)):
        result = combine_v(doc, result)
    return result


def indent_by(i, doc):
    doc = cast_doc(doc)
    if isinstance(doc, Nil):
        return EMPTY
    if isinstance(doc, Indent):
        return Indent(i + doc.indent, doc.doc)
    return Indent(i, doc)


def indent(doc):
    return indent_by(INDENT_WIDTH, doc)


def enclose(open, close, doc):
    """Wraps ``doc`` in the ``open`` and ``close`` brackets.

    Wrapping a doc that is already enclosed (possibly under a
    single indentation) merges the brackets instead of nesting
    another node:

    > enclose('(', ')', enclose('[', ']', x))
    Enclose(open=Beside(Text('('), Text('[')), close=..., doc=x)
    """
    doc = cast_doc(doc)
    inner = doc
    if isinstance(inner, Indent) and isinstance(inner.doc, Enclose):
        inner = inner.doc

    if isinstance(inner, Enclose):
        return Enclose(
            combine_h(open, inner.open),
            combine_h(inner.close, close),
            inner.doc,
        )
    return Enclose(cast_doc(open), cast_doc(close), doc)


LPAREN = text('(')
RPAREN = text(')')

LBRACKET = text('[')
RBRACKET = text(']')

LBRACE = text('{')
RBRACE = text('}')


def parens(doc):
    return enclose(LPAREN, RPAREN, doc)


def brackets(doc):
    return enclose(LBRACKET, RBRACKET, doc)


def braces(doc):
    return enclose(LBRACE, RBRACE, doc)


def punctuate(sep, docs):
    """Stacks ``docs`` vertically, one indentation level deeper,
    with ``sep`` at the end of every doc except the last one."""
    docs = list(docs)
    if not docs:
        return EMPTY

    *init, last = docs
    return indent(vcat([
        *(combine_h(doc, sep) for doc in init),
        last
    ]))


def mparens(flag, doc):
    """Parenthesizes ``doc`` if ``flag`` is true."""
    if flag:
        return parens(doc)
    return cast_doc(doc)
