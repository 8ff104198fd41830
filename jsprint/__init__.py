# -*- coding: utf-8 -*-

"""Top-level package for jsprint."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .api import (
    brackets,
    braces,
    cast_doc,
    combine_h,
    combine_v,
    enclose,
    group,
    hcat,
    indent,
    indent_by,
    mparens,
    parens,
    punctuate,
    space,
    text,
    vcat,
    EMPTY,
    SPACE,
)
from .doc import Doc
from .identifiers import (
    escape,
    escape_char,
    escape_chars,
    escapes,
    is_valid_js_ident,
    local_name,
    variable_name,
)
from .jsprint import (
    PrettyContext,
    pretty_global_exports,
    pretty_js,
    pretty_show,
    register_pretty,
)
from .layout import flatten
from .render import render, render_to_stream
from .utils import hash_string


__all__ = [
    'Doc',
    'EMPTY',
    'SPACE',
    'PrettyContext',
    'brackets',
    'braces',
    'cast_doc',
    'combine_h',
    'combine_v',
    'cprint_js',
    'enclose',
    'escape',
    'escape_char',
    'escape_chars',
    'escapes',
    'flatten',
    'group',
    'hash_string',
    'hcat',
    'indent',
    'indent_by',
    'is_valid_js_ident',
    'local_name',
    'mparens',
    'parens',
    'pprint_js',
    'pretty_global_exports',
    'pretty_js',
    'pretty_show',
    'punctuate',
    'register_pretty',
    'render',
    'render_to_stream',
    'space',
    'text',
    'variable_name',
    'vcat',
]


def pprint_js(value, stream=None, minify=False, *, end='\n'):
    if stream is None:
        stream = sys.stdout
    stream.write(pretty_show(minify, value))
    if end:
        stream.write(end)


try:
    from .extras.color import colored_render_to_stream
except ImportError:
    def cprint_js(*args, **kwargs):
        raise ImportError(
            "You need to install the 'pygments' and 'colorful' "
            "packages for colored output."
        )
else:
    def cprint_js(value, stream=None, minify=False, *, style=None, end='\n'):
        if stream is None:
            stream = sys.stdout
        colored_render_to_stream(stream, pretty_show(minify, value), style=style)
        if end:
            stream.write(end)
