import io

import pytest

from minitalk.linereader import LineReader


def test_reads_bytes_lines():
    reader = LineReader(io.BytesIO(b"one\ntwo\nthree"), 10)
    assert reader.readline() == b"one\n"
    assert reader.readline() == b"two\n"
    assert reader.readline() == b"three"
    assert reader.readline() is None
    assert reader.readline() is None


def test_reads_text_lines():
    reader = LineReader(io.StringIO("alpha\nbeta\n"), 3)
    assert list(reader) == ["alpha\n", "beta\n"]


def test_empty_stream_gives_none():
    assert LineReader(io.BytesIO(b""), 10).readline() is None


@pytest.mark.parametrize("size", [1, 2, 5, 10, 1000])
def test_buffer_size_does_not_change_result(size):
    data = "first line\n\nthird\nlast without newline"
    lines = list(LineReader(io.StringIO(data), size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_blank_lines_are_kept():
    lines = list(LineReader(io.BytesIO(b"\n\nx\n"), 4))
    assert lines == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), size)