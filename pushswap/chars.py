"""Character classification and case conversion over ASCII code points.

Every function accepts either a one-character string or an integer code.
The classifiers return a bool. The converters return a value of the same
kind they were given.
"""

from __future__ import annotations

import operator

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _convert(c, code)


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _convert(c, code)