"""Flattens a document tree into a list of :class:`SLine` records.

The layout makes a single kind of decision: a ``Group`` whose lines
together hold fewer than ``COMPACT_THRESHOLD`` characters is squashed
onto one line. Everything else is determined by the tree shape.

Two boundaries get special treatment when documents are combined:

- ``Beside``: the last line of the left doc and the first line of the
  right doc become one line, at the left line's indentation.
- ``Above``: the last line of the top doc and the first line of the
  bottom doc are overlaid into a single line if both consist only of
  punctuation and there is room between them, which keeps runs of
  closing brackets like ``}]);`` together.
"""
from .doc import (
    Above,
    Beside,
    Enclose,
    Group,
    Indent,
    Nil,
    Space,
    Text,
)
from .sdoc import SLine

COMPACT_THRESHOLD = 40

PUNCTUATION = frozenset('(){}[];:, ')

# Work stack instructions
_EVAL = 'EVAL'
_BESIDE = 'BESIDE'
_ABOVE = 'ABOVE'
_GROUP = 'GROUP'


def is_punctuation(s):
    return all(c in PUNCTUATION for c in s)


def pad(n, s, minify=False):
    if minify or not s:
        return s
    return ' ' * n + s


def join_by(merge, xs, ys):
    """Concatenates two line lists, replacing the last line of ``xs``
    and the first line of ``ys`` with ``merge(x, y)``.

    Both lists are consumed; the shorter one is spliced into the
    longer one in place."""
    if not xs:
        return ys
    if not ys:
        return xs

    merged = merge(xs[-1], ys[0])
    if len(xs) <= len(ys):
        ys[:1] = [*xs[:-1], *merged]
        return ys
    xs[-1:] = merged
    xs.extend(ys[1:])
    return xs


def beside(left, right):
    return [SLine(left.indent, left.text + right.text)]


def overlay(top, bottom, minify=False):
    if is_punctuation(top.text + bottom.text):
        gap = bottom.indent - top.end
        if gap > 0:
            return [SLine(top.indent, top.text + pad(gap, bottom.text, minify))]

        gap = top.indent - bottom.end
        if gap > 0:
            return [
                SLine(bottom.indent, top.text + pad(gap, bottom.text, minify))
            ]
    return [top, bottom]


def compact(lines):
    if not lines:
        return lines
    first, *rest = lines
    text = first.text + ''.join(line.text for line in rest)
    return [SLine(first.indent, text)]


def flatten(doc, indent=0, minify=False, *, threshold=COMPACT_THRESHOLD):
    """Lays out ``doc`` starting at column ``indent`` and returns
    the list of resulting lines.

    Runs on an explicit stack: long chains of ``Above`` or ``Beside``
    nodes, as produced by ``vcat`` over a large module, are deeper than
    the interpreter's recursion limit allows."""
    stack = [(_EVAL, indent, doc)]
    results = []

    while stack:
        op, i, doc = stack.pop()

        if op == _BESIDE:
            right = results.pop()
            left = results.pop()
            results.append(join_by(beside, left, right))
            continue
        elif op == _ABOVE:
            bottom = results.pop()
            top = results.pop()
            results.append(join_by(
                lambda t, b: overlay(t, b, minify),
                top,
                bottom
            ))
            continue
        elif op == _GROUP:
            lines = results[-1]
            if sum(len(line.text) for line in lines) < threshold:
                results[-1] = compact(lines)
            continue

        if isinstance(doc, Text):
            results.append([SLine(i, doc.value)] if doc.value else [])
        elif isinstance(doc, Nil):
            results.append([])
        elif isinstance(doc, Space):
            results.append([] if minify else [SLine(i, ' ')])
        elif isinstance(doc, Indent):
            stack.append((_EVAL, i + doc.indent, doc.doc))
        elif isinstance(doc, Group):
            stack.append((_GROUP, i, None))
            stack.append((_EVAL, i, doc.doc))
        elif isinstance(doc, Enclose):
            stack.append((
                _EVAL,
                i,
                Group(Above(doc.open, Above(doc.doc, doc.close)))
            ))
        elif isinstance(doc, Beside):
            stack.append((_BESIDE, i, None))
            stack.append((_EVAL, i, doc.right))
            stack.append((_EVAL, i, doc.left))
        elif isinstance(doc, Above):
            stack.append((_ABOVE, i, None))
            stack.append((_EVAL, i, doc.bottom))
            stack.append((_EVAL, i, doc.top))
        else:
            raise TypeError(
                f'Unknown doc type {type(doc).__name__}: {repr(doc)}'
            )

    assert len(results) == 1
    return results[0]
