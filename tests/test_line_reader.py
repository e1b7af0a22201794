import os

import pytest
from hypothesis import given, strategies as st

from pushswap.lib.line_reader import LineReader


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


@pytest.mark.parametrize("buffer_size", [1, 2, 5, 42, 10000])
def test_reads_lines_in_order(buffer_size):
    fd = _pipe_with(b"first\nsecond\n\nlast")
    try:
        reader = LineReader(fd, buffer_size)
        assert reader.read_line() == b"first\n"
        assert reader.read_line() == b"second\n"
        assert reader.read_line() == b"\n"
        assert reader.read_line() == b"last"
        assert reader.read_line() is None
        assert reader.read_line() is None
    finally:
        os.close(fd)


def test_empty_input_gives_none():
    fd = _pipe_with(b"")
    try:
        assert LineReader(fd).read_line() is None
    finally:
        os.close(fd)


def test_iteration_from_file(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes(b"a\nbb\nccc\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert list(LineReader(fd, 3)) == [b"a\n", b"bb\n", b"ccc\n"]
    finally:
        os.close(fd)


@given(
    data=st.binary(max_size=2000).map(lambda b: b.replace(b"\0", b"")),
    buffer_size=st.integers(min_value=1, max_value=64),
)
def test_round_trip(data, buffer_size):
    fd = _pipe_with(data)
    try:
        lines = list(LineReader(fd, buffer_size))
    finally:
        os.close(fd)
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(b"\n" not in line[:-1] for line in lines)


def test_invalid_descriptor_raises():
    with pytest.raises(OSError):
        LineReader(-1).read_line()


@pytest.mark.parametrize("buffer_size", [0, -3])
def test_non_positive_buffer_size_rejected(buffer_size):
    with pytest.raises(ValueError):
        LineReader(0, buffer_size)