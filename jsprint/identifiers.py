"""Turning source names and strings into JavaScript text."""
import string

from .api import text
from .utils import hash_string

_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\n': '\\n',
    '\r': '\\r',
    '\u2028': '\\u2028',
    '\u2029': '\\u2029',
}

_VALID_FIRST = frozenset(string.ascii_letters + '_$')
_VALID_OTHER = _VALID_FIRST | frozenset(string.digits)

VALID_NAME_PREFIX = 'z_'
HASHED_NAME_PREFIX = 'h_'

LOCAL_NAME_LETTERS = string.ascii_lowercase


def escape_char(c):
    return _ESCAPES.get(c, c)


def escape_chars(s):
    return [escape_char(c) for c in s]


def escape(s):
    """Escapes ``s`` for use inside a double quoted JavaScript
    string literal."""
    return ''.join(escape_chars(s))


def escapes(s):
    return text(escape(s))


def is_valid_js_ident(s):
    """Checks if ``s`` is a valid JavaScript identifier.

    Keywords are not rejected, since every name gets a prefix.
    The check is conservative: it only admits ASCII letters,
    digits, ``_`` and ``$``."""
    if not s:
        return False
    first, rest = s[0], s[1:]
    return first in _VALID_FIRST and all(c in _VALID_OTHER for c in rest)


def variable_name(s):
    if is_valid_js_ident(s):
        return VALID_NAME_PREFIX + s
    return HASHED_NAME_PREFIX + str(hash_string(s))


def local_name(depth, index):
    """Name of the variable bound ``index`` binders up from a
    position under ``depth`` binders.

    Names run a, b, ..., z, a0, b0, ..., z0, a1, ..."""
    position = depth - index - 1
    if position < 0:
        raise AssertionError(
            f'de Bruijn index {index} out of range at depth {depth}'
        )

    cycle, letter = divmod(position, len(LOCAL_NAME_LETTERS))
    suffix = str(cycle - 1) if cycle else ''
    return LOCAL_NAME_LETTERS[letter] + suffix
