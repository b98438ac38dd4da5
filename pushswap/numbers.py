"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text with no digits gives 0. The result wraps
    around like a 32-bit signed integer.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    magnitude = int(digits) if digits else 0
    return _wrap_int32(sign * magnitude)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(operator.index(n))