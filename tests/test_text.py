import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.text import (
    find_within,
    for_each_indexed,
    int_to_str,
    join,
    map_indexed,
    parse_int,
    split,
    substring,
    trim,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(INT32)
def test_parse_int_round_trips_int_to_str(number):
    assert parse_int(int_to_str(number)) == number


@given(INT32)
def test_int_to_str_round_trips_through_int(number):
    assert int(int_to_str(number)) == number


def test_int_to_str_minimum():
    assert int_to_str(-2147483648) == "-2147483648"


def test_parse_int_skips_whitespace_and_sign():
    assert parse_int(" \t\n\v\f\r-42") == -42
    assert parse_int("+17") == 17


def test_parse_int_stops_at_non_digit():
    assert parse_int("123abc456") == 123
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int("--5") == 0


def test_parse_int_overflow_positive_returns_minus_one():
    assert parse_int("99999999999999999999") == -1


def test_parse_int_overflow_negative_returns_zero():
    assert parse_int("-99999999999999999999") == 0


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483648") == -2147483648


@given(st.lists(st.text(alphabet="abc xyz", min_size=0, max_size=8), max_size=6))
def test_split_has_no_empty_or_separator_pieces(parts):
    text = " ".join(parts)
    pieces = split(text, " ")
    assert all(piece and " " not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(" ", "")


def test_split_collapses_repeated_separators():
    assert split("  1 2   3 ", " ") == ["1", "2", "3"]
    assert split("    ", " ") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", "")
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_trim_both_ends():
    assert trim("xxhelloxyx", "xy") == "hello"
    assert trim("xyxy", "xy") == ""
    assert trim("abc", "") == "abc"


@given(st.text(alphabet="ab ", max_size=12))
def test_trim_result_edges_not_in_set(text):
    result = trim(text, " ")
    assert result == "" or (result[0] != " " and result[-1] != " ")
    assert result in text


def test_find_within_respects_limit():
    assert find_within("lorem ipsum", "ipsum", 11) == 6
    assert find_within("lorem ipsum", "ipsum", 10) is None
    assert find_within("lorem", "", 0) == 0


@given(st.text(alphabet="ab", max_size=10), st.text(alphabet="ab", min_size=1, max_size=3))
def test_find_within_full_limit_agrees_with_find(haystack, needle):
    index = find_within(haystack, needle, len(haystack))
    if index is None:
        assert needle not in haystack
    else:
        assert haystack[index:index + len(needle)] == needle


def test_find_within_negative_limit():
    with pytest.raises(ValueError):
        find_within("abc", "a", -1)


def test_substring_cases():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 10, 3) == ""
    assert substring("hello", 2, 100) == "llo"


def test_substring_negative_arguments():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)
    with pytest.raises(ValueError):
        substring("hello", 0, -2)


@given(st.text(max_size=10), st.text(max_size=10))
def test_join_concatenates(first, second):
    joined = join(first, second)
    assert joined.startswith(first)
    assert joined[len(first):] == second


def test_map_indexed_passes_index():
    assert map_indexed("abc", lambda i, c: c * (i + 1)) == "abbccc"
    assert map_indexed("", lambda i, c: c) == ""


def test_for_each_indexed_mutates_in_place():
    chars = list("abcd")
    seen = []

    def upper_odd(index, char):
        seen.append(index)
        return char.upper() if index % 2 else char

    for_each_indexed(chars, upper_odd)
    assert chars == ["a", "B", "c", "D"]
    assert seen == [0, 1, 2, 3]