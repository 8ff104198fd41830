from io import StringIO

import pytest

from jsprint.api import (
    group,
    hcat,
    indent,
    vcat,
    EMPTY,
    SPACE,
)
from jsprint.render import (
    chunks,
    mk_indent,
    render,
    render_to_stream,
    MINIFIED_LINE_LENGTH,
)
from jsprint.sdoc import SLine


def test_render_indents_lines():
    doc = vcat(['a', indent('b'), 'c'])
    assert render(False, doc) == 'a\n  b\nc'


def test_render_is_deterministic():
    doc = group(vcat(['function () {', indent('return 1;'), '}']))
    assert render(False, doc) == render(False, doc)


def test_render_empty():
    assert render(False, EMPTY) == ''
    assert render(True, EMPTY) == ''


def test_mk_indent():
    assert mk_indent(SLine(2, 'x')) == '  x'
    assert mk_indent(SLine(2, '')) == ''
    assert mk_indent(SLine(2, 'x'), minify=True) == 'x'


def test_minify_drops_indentation_and_spaces():
    doc = vcat(['var', indent(hcat(['x', SPACE, '=', SPACE, '1;']))])
    assert render(False, doc) == 'var\n  x = 1;'
    assert render(True, doc) == 'var' + 'x=1;'


def test_minify_packs_lines():
    doc = vcat(['a' * 200, 'b' * 200, 'c' * 200])
    assert render(True, doc) == 'a' * 200 + 'b' * 200 + '\n' + 'c' * 200


def test_minify_starts_new_line_when_budget_exceeded():
    doc = vcat(['a' * 300, 'b' * 300, 'c' * 300])
    assert render(True, doc) == '\n'.join(['a' * 300, 'b' * 300, 'c' * 300])


def test_minify_fills_exactly_to_budget():
    doc = vcat(['a' * 250, 'b' * 250])
    assert MINIFIED_LINE_LENGTH == 500
    assert render(True, doc) == 'a' * 250 + 'b' * 250


def test_minify_oversized_fragment_stands_alone():
    assert render(True, vcat(['x' * 600, 'y'])) == 'x' * 600 + '\ny'
    assert render(True, vcat(['y', 'x' * 600, 'z'])) == (
        'y\n' + 'x' * 600 + '\nz'
    )


@pytest.mark.parametrize('lengths', [
    [10] * 120,
    [499, 1, 1, 499],
    [120, 380, 1, 250, 250, 251],
    [700, 3, 497, 800],
])
def test_minify_line_length_bound(lengths):
    fragments = [
        chr(ord('a') + idx % 26) * length
        for idx, length in enumerate(lengths)
    ]
    output = render(True, vcat(fragments))

    assert output.replace('\n', '') == ''.join(fragments)
    for line in output.split('\n'):
        assert len(line) <= MINIFIED_LINE_LENGTH or line in fragments


def test_line_length_override():
    doc = vcat(['ab', 'cd', 'ef'])
    assert render(True, doc, line_length=4) == 'abcd\nef'


def test_chunks():
    assert list(chunks([])) == ['']
    assert list(chunks(['a', 'b'], 1)) == ['a', 'b']
    assert list(chunks(['a', 'b', 'c'], 2)) == ['ab', 'c']


def test_render_to_stream():
    stream = StringIO()
    render_to_stream(stream, [SLine(0, 'a'), SLine(4, 'b')])
    assert stream.getvalue() == 'a\n    b'

    stream = StringIO()
    render_to_stream(stream, [SLine(0, 'a'), SLine(4, 'b')], minify=True)
    assert stream.getvalue() == 'ab'
