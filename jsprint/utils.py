HASH_MODULUS = 2 ** 64


def hash_string(s):
    """Stable 64-bit hash of ``s``. Unlike the builtin ``hash``,
    the result does not change between interpreter runs."""
    h = 0
    for c in s:
        h = (h * 31 + ord(c)) % HASH_MODULUS
    return h
