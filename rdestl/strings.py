"""Comparison of character sequences."""

from itertools import takewhile

_TERMINATORS = ("\0", 0)


def _until_terminator(sequence):
    return list(takewhile(lambda element: element not in _TERMINATORS, sequence))


def strcompare(first, second, length=None):
    """Compare two sequences and return -1, 0 or 1.

    Without ``length`` each sequence ends at its first NUL element (or at
    its end), and a proper prefix compares less. With ``length`` exactly
    the first ``length`` elements are compared, NULs included.
    """
    if length is None:
        a, b = _until_terminator(first), _until_terminator(second)
    else:
        a, b = list(first[:length]), list(second[:length])
    return (a > b) - (a < b)