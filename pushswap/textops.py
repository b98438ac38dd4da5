"""Building, cutting and copying text.

As elsewhere in the package, a string is taken to end at its first NUL
character. Functions that fill a fixed-size destination return the text
that would be stored, together with the length the operation tried to
create, so that a caller can detect truncation.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

_NUL = "\0"


def _terminate(s: str) -> str:
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _separator(sep: int | str) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    return chr(operator.index(sep))


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    text = _terminate(s)
    separator = _separator(sep)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives the empty string.
    """
    text = _terminate(s)
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return _terminate(a) + _terminate(b)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _terminate(s).strip(_terminate(charset))


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminating NUL."""
    return _terminate(s)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_terminate(s)))


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on each item of ``s`` in place.

    A return value other than None replaces the item. Iteration stops at a
    NUL item (``"\\0"`` or ``0``).
    """
    for index, item in enumerate(s):
        if item == _NUL or item == 0:
            break
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Return the text stored (at most ``size - 1`` characters) and the full
    length of ``src``. With a size of zero nothing is stored.
    """
    text = _terminate(src)
    size = _non_negative(size, "size")
    stored = text[: size - 1] if size > 0 else ""
    return stored, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Return the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is left unchanged.
    """
    head = _terminate(dst)
    tail = _terminate(src)
    size = _non_negative(size, "size")
    used = min(len(head), size)
    if used >= size:
        return head, used + len(tail)
    return head + tail[: size - used - 1], used + len(tail)