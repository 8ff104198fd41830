import logging
from io import StringIO

from .layout import flatten

logger = logging.getLogger(__name__)

MINIFIED_LINE_LENGTH = 500


def mk_indent(line, minify=False, separator=' '):
    if minify or not line.text:
        return line.text
    return separator * line.indent + line.text


def chunks(strings, line_length=MINIFIED_LINE_LENGTH):
    """Packs ``strings`` greedily into chunks of at most ``line_length``
    characters. A string is never split, so one that is longer than
    ``line_length`` on its own gets a chunk to itself."""
    chunk = []
    length = 0
    for s in strings:
        n = len(s)
        if chunk and length + n > line_length:
            yield ''.join(chunk)
            chunk = []
            length = 0
        if n > line_length:
            logger.debug(
                'Fragment of %d characters exceeds minified line length %d',
                n,
                line_length,
            )
        chunk.append(s)
        length += n
    yield ''.join(chunk)


def render_to_stream(
    stream,
    lines,
    minify=False,
    newline='\n',
    separator=' ',
    *,
    line_length=MINIFIED_LINE_LENGTH
):
    strings = (mk_indent(line, minify, separator) for line in lines)
    if minify:
        strings = chunks(strings, line_length)

    for idx, s in enumerate(strings):
        if idx:
            stream.write(newline)
        stream.write(s)


def render(minify, doc, *, line_length=MINIFIED_LINE_LENGTH):
    """Lays out ``doc`` and returns the resulting source text.

    With ``minify``, indentation and ``SPACE`` docs are dropped
    and the lines are packed into chunks of ``line_length``
    characters at most."""
    stream = StringIO()
    render_to_stream(
        stream,
        flatten(doc, minify=minify),
        minify,
        line_length=line_length,
    )
    return stream.getvalue()
