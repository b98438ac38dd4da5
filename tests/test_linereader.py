import io
import os

import pytest

from pushswap.linereader import BUFFER_SIZE, LineReader


def test_default_buffer_reads_line_longer_than_buffer():
    long_line = "x" * (BUFFER_SIZE * 3 + 5) + "\n"
    reader = LineReader(io.StringIO(long_line + "sa"))
    assert reader.next_line() == long_line
    assert reader.next_line() == "sa"
    assert reader.next_line() is None


def test_lines_keep_newlines_and_last_may_lack_one():
    reader = LineReader(io.StringIO("sa\npb\nra"))
    assert list(reader) == ["sa\n", "pb\n", "ra"]


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


def test_returns_none_after_exhaustion():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 64])
def test_buffer_size_does_not_change_lines(size):
    text = "pa\nrra\n\nrrr\nsb"
    reader = LineReader(io.StringIO(text), buffer_size=size)
    lines = list(reader)
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_binary_stream_gives_bytes():
    reader = LineReader(io.BytesIO(b"ss\nrr\n"))
    assert list(reader) == [b"ss\n", b"rr\n"]


def test_reads_from_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"ra\nrb\n")
        os.close(write_fd)
        write_fd = -1
        lines = list(LineReader(read_fd, buffer_size=4))
    finally:
        os.close(read_fd)
        if write_fd >= 0:
            os.close(write_fd)
    assert lines == [b"ra\n", b"rb\n"]


def test_rejects_non_positive_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=0)


def test_rejects_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_discards_buffer_and_propagates():
    stream = _FailingStream()
    reader = LineReader(stream)
    with pytest.raises(OSError):
        reader.next_line()
    stream.calls = 10
    with pytest.raises(OSError):
        reader.next_line()
    assert reader._pending is None
    assert stream.calls == 11


def test_large_input_round_trip():
    text = "".join(f"line {n}\n" for n in range(500))
    lines = list(LineReader(io.StringIO(text), buffer_size=7))
    assert len(lines) == 500
    assert "".join(lines) == text