"""Searching and comparing in text and in raw bytes.

The text functions treat a string as ending at its first NUL character,
the way a C string ends. They return positions as indices, or None where
nothing is found. The byte functions look at exactly ``n`` bytes and do not
stop at a NUL.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from itertools import islice, zip_longest

_NUL = "\0"


def _terminate(s: str) -> str:
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _check_count(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return n


def _bytes_prefix(data: bytes | bytearray | memoryview, n: int) -> bytes:
    n = _check_count(n)
    raw = bytes(data)
    if n > len(raw):
        raise ValueError(f"cannot read {n} bytes from a buffer of {len(raw)}")
    return raw[:n]


def _first_difference(pairs: Iterator[tuple[int, int]]) -> int:
    for x, y in pairs:
        if x != y:
            return x - y
    return 0


def _code_pairs(a: str, b: str) -> Iterator[tuple[int, int]]:
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        yield ord(x), ord(y)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    text = _terminate(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    found = text.find(ch)
    return None if found < 0 else found


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    text = _terminate(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    found = text.rfind(ch)
    return None if found < 0 else found


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the difference of the first unequal codes.

    Zero means equal, a negative value means ``a`` sorts first.
    """
    return _first_difference(_code_pairs(_terminate(a), _terminate(b)))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, as :func:`strcmp` does."""
    n = _check_count(n)
    pairs = _code_pairs(_terminate(a), _terminate(b))
    return _first_difference(islice(pairs, n))


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. Return the index or None.
    """
    length = _check_count(length)
    text = _terminate(haystack)
    target = _terminate(needle)
    if not target:
        return 0
    found = text.find(target, 0, min(length, len(text)))
    return None if found < 0 else found


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes.

    ``c`` is reduced to its low eight bits. Return None when it is absent.
    """
    window = _bytes_prefix(data, n)
    found = window.find(operator.index(c) & 0xFF)
    return None if found < 0 else found


def memcmp(
    a: bytes | bytearray | memoryview,
    b: bytes | bytearray | memoryview,
    n: int,
) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Return the difference of the first unequal bytes, or 0 when they match.
    """
    left = _bytes_prefix(a, n)
    right = _bytes_prefix(b, n)
    return _first_difference(zip(left, right))