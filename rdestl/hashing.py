"""Hash functions for integer and string keys."""

_MASK32 = 0xFFFFFFFF


def int_hash(value):
    """Return the 32-bit Robert Jenkins integer hash of ``value``.

    The value is reduced to its low 32 bits before hashing.
    """
    a = int(value) & _MASK32
    a = (a + 0x7ED55D16 + (a << 12)) & _MASK32
    a = (a ^ 0xC761C23C ^ (a >> 19)) & _MASK32
    a = (a + 0x165667B1 + (a << 5)) & _MASK32
    a = ((a + 0xD3A2646C) ^ (a << 9)) & _MASK32
    a = (a + 0xFD7046C5 + (a << 3)) & _MASK32
    a = (a ^ 0xB55A4F09 ^ (a >> 16)) & _MASK32
    return a


def string_hash(text):
    """Return a 31-bit hash of a string or bytes object.

    Each element updates the hash as ``h = c + (h << 6) + (h << 16) - h``.
    """
    h = 0
    for element in text:
        code = ord(element) if isinstance(element, str) else int(element)
        h = (code + (h << 6) + (h << 16) - h) & _MASK32
    return h & 0x7FFFFFFF