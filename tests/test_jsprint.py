from io import StringIO

import pytest

from jsprint import pprint_js
from jsprint.api import text
from jsprint.jsprint import (
    PrettyContext,
    pretty_global_exports,
    pretty_js,
    pretty_show,
    register_pretty,
)
from jsprint.render import render
from jsprint.syntax import (
    Apply,
    Array,
    BinOp,
    Char,
    Comment,
    Const,
    Double,
    Exp,
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
    Object,
    PreOp,
    PlainJS,
    String,
    global_ids,
    NO_COMMENT,
    NULL,
    SELF,
    UNDEFINED,
)
from jsprint.utils import hash_string


def local(index):
    return Local(LocalId(index))


def global_(*parts):
    return Global(GlobalId(parts))


LONG_OBJECT = Object({
    MemberId('first'): String('aaaaaaaaaa'),
    MemberId('second'): String('bbbbbbbbbb'),
})


@pytest.mark.parametrize('value, expected', [
    (SELF, 'exports'),
    (UNDEFINED, 'undefined'),
    (NULL, 'null'),
    (Const('Math.PI'), 'Math.PI'),
    (PlainJS('function () { return 1; }'), 'function () { return 1; }'),
    (String('a"b'), '"a\\"b"'),
    (Char('\n'), '"\\n"'),
    (Integer(42), 'agdaRTS.primIntegerFromString("42")'),
    (Double(1.5), '1.5'),
    (Double(float('inf')), 'Infinity'),
    (Double(float('-inf')), '-Infinity'),
    (Double(float('nan')), 'NaN'),
    (global_('Agda', 'Builtin', 'Nat'), 'z_Agda_Builtin_Nat'),
    (global_('a-b'), 'h_' + str(hash_string('a-b'))),
])
def test_atoms(value, expected):
    assert pretty_show(False, value) == expected


def test_apply():
    value = Apply(Const('f'), [Const('x'), Const('y')])
    assert pretty_show(False, value) == 'f(x,y)'
    assert pretty_show(False, Apply(Const('main'), [])) == 'main()'


def test_apply_integer():
    value = Apply(global_('m'), [Integer(3)])
    assert pretty_show(False, value) == (
        'z_m(agdaRTS.primIntegerFromString("3"))'
    )


def test_lambda():
    value = Lambda(2, BinOp(local(1), '+', local(0)))
    assert pretty_show(False, value) == '(a,b) => (a + b)'
    assert pretty_show(True, value) == '(a,b)=>(a + b)'


def test_lambda_without_params():
    assert pretty_show(False, Lambda(0, Const('1'))) == '() => 1'


def test_lambda_returning_object():
    value = Lambda(1, Object({MemberId('x'): local(0)}))
    assert pretty_show(True, value) == 'a=>({"x":a})'
    assert pretty_show(False, value).strip() == 'a => ({"x": a})'


def test_nested_lambdas_name_by_depth():
    value = Lambda(1, Lambda(1, Apply(local(1), [local(0)])))
    assert pretty_show(True, value) == 'a=>b=>a(b)'


def test_unbound_local():
    with pytest.raises(AssertionError):
        pretty_show(False, local(0))


def test_object_sorts_members():
    value = Object({
        MemberId('b'): Const('2'),
        MemberIndex(1): Const('4'),
        MemberId('a'): Const('1'),
        MemberIndex(0): Const('3'),
    })
    assert pretty_show(False, value) == '{"a": 1,"b": 2,0: 3,1: 4}'


def test_empty_object():
    assert pretty_show(False, Object()) == '{}'


def test_long_object_is_broken():
    assert pretty_show(False, LONG_OBJECT) == '\n'.join([
        '{',
        '  "first": "aaaaaaaaaa",',
        '  "second": "bbbbbbbbbb"',
        '}',
    ])


def test_array_of_long_object_merges_brackets():
    value = Array([(NO_COMMENT, LONG_OBJECT)])
    assert pretty_show(False, value) == '\n'.join([
        '[{',
        '  "first": "aaaaaaaaaa",',
        '  "second": "bbbbbbbbbb"',
        '}]',
    ])


def test_array_comments():
    value = Array([(Comment('first'), Const('1')), (NO_COMMENT, Const('2'))])
    assert pretty_show(False, value) == '[/* first */1,2]'
    assert pretty_show(True, value) == '[1,2]'


def test_lookup():
    assert pretty_show(False, Lookup(Const('o'), MemberId('k'))) == 'o["k"]'

    value = Lookup(Const('o'), MemberIndex(3, Comment('x')))
    assert pretty_show(False, value) == 'o[3/* x */]'
    assert pretty_show(True, value) == 'o[3]'


def test_operators():
    value = If(Const('c'), Const('t'), Const('e'))
    assert pretty_show(False, value) == '(c? t: e)'
    assert pretty_show(True, value) == '(c?t:e)'
    assert pretty_show(False, PreOp('-', Const('x'))) == '(- x)'
    assert pretty_show(False, BinOp(Const('x'), '+', Const('y'))) == '(x + y)'


def test_module():
    value = Module(
        GlobalId(['M']),
        imports=[GlobalId(['Agda', 'Primitive'])],
        exports=[
            Export(
                [MemberId('a'), MemberId('b')],
                Apply(global_('Agda', 'Builtin'), [Const('1')])
            ),
        ],
    )
    assert pretty_show(False, value) == '\n'.join([
        'var agdaRTS = require("agda-rts");',
        'var z_Agda_Builtin = require("Agda.Builtin");',
        'var z_Agda_Primitive = require("Agda.Primitive");',
        'exports["a"] = {};',
        'exports["a"]["b"] = z_Agda_Builtin(1);',
    ])
    assert pretty_show(True, value) == ''.join([
        'var agdaRTS=require("agda-rts");',
        'var z_Agda_Builtin=require("Agda.Builtin");',
        'var z_Agda_Primitive=require("Agda.Primitive");',
        'exports["a"]={};',
        'exports["a"]["b"]=z_Agda_Builtin(1);',
    ])


def test_module_with_defined_parents():
    value = Module(
        GlobalId(['M']),
        exports=[
            Export([MemberId('a')], Object()),
            Export([MemberId('a'), MemberId('b')], Const('1')),
        ],
    )
    assert pretty_show(False, value) == '\n'.join([
        'var agdaRTS = require("agda-rts");',
        'exports["a"] = {};',
        'exports["a"]["b"] = 1;',
    ])


def test_module_main_call():
    value = Module(GlobalId(['M']), call_main=Apply(Const('main'), []))
    assert pretty_show(False, value) == (
        'var agdaRTS = require("agda-rts");\nmain()'
    )


def test_global_exports():
    pairs = [(GlobalId(['M']), Export([MemberId('f')], Const('1')))]
    doc = pretty_global_exports(pairs, PrettyContext())
    assert render(False, doc) == 'z_M["f"] = 1;'


def test_global_ids():
    g1, g2 = GlobalId(['A']), GlobalId(['B'])
    exports = [
        Export([MemberId('x')], Apply(Global(g1), [Global(g2), Global(g1)])),
        Export([MemberId('y')], Lambda(1, Global(g2))),
    ]
    assert list(global_ids(exports)) == [g1, g2]


def test_context_bind():
    ctx = PrettyContext(depth=1, minify=True)
    bound = ctx.bind(2)
    assert bound.depth == 3
    assert bound.minify is True
    assert ctx.depth == 1


def test_unknown_value():
    with pytest.raises(TypeError):
        pretty_js(object(), PrettyContext())


def test_register_pretty():
    class Debugger(Exp):
        __slots__ = ()

    @register_pretty(Debugger)
    def pretty_debugger(value, ctx):
        return text('debugger')

    assert pretty_show(False, Apply(Debugger(), [])) == 'debugger()'


def test_pprint_js():
    stream = StringIO()
    pprint_js(Apply(Const('f'), []), stream=stream)
    assert stream.getvalue() == 'f()\n'
