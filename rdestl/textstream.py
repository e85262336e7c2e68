"""A minimal whitespace-separated reader that converts words to numbers."""

import re

_WORD_PATTERN = re.compile(r"[^ \t\r\n]*")
_SPACE_PATTERN = re.compile(r"[ \t\r\n]*")
_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _leading_int(word):
    match = _INT_PREFIX.match(word)
    return int(match.group()) if match else 0


def _leading_float(word):
    match = _FLOAT_PREFIX.match(word)
    return float(match.group()) if match else 0.0


class StringStream:
    """Reads whitespace-separated words from a string.

    Whitespace is space, tab, carriage return and newline. Numeric reads
    take the longest numeric prefix of a word, yielding zero when there
    is none.
    """

    def __init__(self, text=None):
        self._text = ""
        self._pos = 0
        self.reset(text)

    def good(self):
        """Return True while unread text remains."""
        return self._pos < len(self._text)

    def eof(self):
        """Return True once all text has been read."""
        return not self.good()

    def __bool__(self):
        return self.good()

    def reset(self, text=None):
        """Start reading ``text`` from its beginning; None or "" leaves nothing to read."""
        self._text = text or ""
        self._pos = _SPACE_PATTERN.match(self._text).end()

    def _next_word(self):
        if not self.good():
            raise EOFError("no more words in stream")
        end = _WORD_PATTERN.match(self._text, self._pos).end()
        word = self._text[self._pos:end]
        self._pos = _SPACE_PATTERN.match(self._text, end).end()
        return word

    def read_int(self):
        """Read the next word as an integer."""
        return _leading_int(self._next_word())

    def read_float(self):
        """Read the next word as a float."""
        return _leading_float(self._next_word())

    def read_bool(self):
        """Read the next word as an integer and return whether it is non-zero."""
        return bool(_leading_int(self._next_word()))

    def read_str(self):
        """Read the next word as it stands."""
        return self._next_word()