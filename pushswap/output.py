"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
from typing import TextIO

_NUL = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def putchar_fd(c: int | str, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(c))


def putstr_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` up to its first NUL; write nothing when ``s`` is None."""
    if s is None:
        return
    end = s.find(_NUL)
    stream.write(s if end < 0 else s[:end])


def putendl_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` as :func:`putstr_fd` does, then a newline."""
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of ``n``."""
    stream.write(str(operator.index(n)))