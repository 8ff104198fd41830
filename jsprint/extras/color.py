from io import StringIO

import colorful
from pygments import styles
from pygments.lexers.javascript import JavascriptLexer

from ..render import render

default_style = styles.get_style_by_name('monokai')


def styleattrs_to_colorful(attrs):
    c = colorful.reset
    if attrs['color'] or attrs['bgcolor']:
        # Colorful doesn't have a way to directly set Hex/RGB
        # colors- until I find a better way, we do it like this :)
        accessor = ''
        if attrs['color']:
            colorful.update_palette({'jsprintCurrFg': attrs['color']})
            accessor = 'jsprintCurrFg'
        if attrs['bgcolor']:
            colorful.update_palette({'jsprintCurrBg': attrs['bgcolor']})
            accessor += '_on_jsprintCurrBg'
        c &= getattr(colorful, accessor)
    if attrs['bold']:
        c &= colorful.bold
    if attrs['italic']:
        c &= colorful.italic
    if attrs['underline']:
        c &= colorful.underline
    return c


def colored_render_to_stream(stream, source, style=None):
    """Writes the JavaScript ``source`` to ``stream``, highlighted
    with the pygments ``style`` (monokai by default)."""
    if style is None:
        style = default_style

    # Keep the rendered text intact, newlines included
    lexer = JavascriptLexer(stripnl=False, ensurenl=False)

    colored = False
    for token_type, value in lexer.get_tokens(source):
        tokenattrs = style.style_for_token(token_type)
        stream.write(str(styleattrs_to_colorful(tokenattrs)))
        stream.write(value)
        colored = True

    if colored:
        stream.write(str(colorful.reset))


def colored_render(minify, doc, style=None):
    stream = StringIO()
    colored_render_to_stream(stream, render(minify, doc), style=style)
    return stream.getvalue()
