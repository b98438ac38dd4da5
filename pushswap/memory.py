"""Filling, allocating and copying byte buffers.

Buffers written to must be mutable: a bytearray or a writable memoryview.
A slice of a memoryview stands in for a pointer into the middle of a buffer.
Every function checks that ``n`` bytes fit in the buffers it touches.
"""

from __future__ import annotations

import operator

Buffer = bytearray | memoryview


def _check(n: int, *buffers: bytes | bytearray | memoryview) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"{n} bytes do not fit in a buffer of {len(buf)}")
    return n


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to the low eight bits of ``value``."""
    n = _check(n, buf)
    buf[:n] = bytes((operator.index(value) & 0xFF,)) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` items of ``size`` bytes each."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    n = _check(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy ``n`` bytes like :func:`memcpy`, correct even when the regions overlap."""
    n = _check(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest