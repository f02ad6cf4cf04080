import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.lines import LineReader


class FailingStream:
    def read(self, size):
        raise OSError("boom")


def test_lines_with_small_buffer():
    reader = LineReader(io.StringIO("ab\ncdef\ng"), buffer_size=2)
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cdef\n"
    assert reader.read_line() == "g"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


def test_blank_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), buffer_size=1)) == ["\n", "\n"]


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"one\ntwo\n"), buffer_size=3)
    assert list(reader) == [b"one\n", b"two\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=size)


def test_read_error_propagates():
    reader = LineReader(FailingStream())
    with pytest.raises(OSError):
        reader.read_line()


@given(
    st.text(alphabet=st.sampled_from("ab\n"), max_size=60),
    st.integers(min_value=1, max_value=8),
)
def test_round_trip(text, size):
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines == text.splitlines(keepends=True)