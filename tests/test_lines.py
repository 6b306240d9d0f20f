import io

import pytest

from sigtalk.lines import LineReader


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 1024])
def test_text_round_trip(chunk_size):
    data = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(data), chunk_size))
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


@pytest.mark.parametrize("chunk_size", [1, 4, 100])
def test_binary_round_trip(chunk_size):
    data = b"alpha\nbeta\n"
    reader = LineReader(io.BytesIO(data), chunk_size)
    assert reader.read_line() == b"alpha\n"
    assert reader.read_line() == b"beta\n"
    assert reader.read_line() is None


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_stays_exhausted():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    lines = list(LineReader(io.StringIO("\n\n"), 5))
    assert lines == ["\n", "\n"]


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls > 2:
            raise OSError("read failed")
        return "a"


def test_read_error_propagates_and_clears():
    stream = _FailingStream()
    reader = LineReader(stream)
    with pytest.raises(OSError):
        reader.read_line()
    with pytest.raises(OSError):
        reader.read_line()
    assert stream.calls == 4