"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Union

BUFFER_SIZE = 1024

Source = Union[int, IO[str], IO[bytes]]


def _newline(data: str | bytes) -> str | bytes:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader(Generic[AnyStr]):
    """Return successive lines of a stream or file descriptor.

    Each line keeps its trailing newline; the last one may lack it. Text
    streams give str lines, binary streams and descriptors give bytes.
    Data is read ``buffer_size`` units at a time and what follows a line
    is kept for the next call.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor: {source}")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _read(self) -> str | bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and _newline(pending) in pending

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted.

        A read error discards anything buffered and propagates.
        """
        try:
            while not self._has_line():
                chunk = self._read()
                if not chunk:
                    break
                self._pending = chunk if self._pending is None else self._pending + chunk
        except OSError:
            self._pending = None
            raise
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(_newline(pending))
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1 :] or None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line