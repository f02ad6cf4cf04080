import pytest

from pushswap.parse import InputError, parse_arguments, parse_number


def test_parse_number_plain_and_signed():
    assert parse_number("42") == 42
    assert parse_number("+7") == 7
    assert parse_number("-15") == -15
    assert parse_number("00012") == 12


def test_parse_number_limits():
    assert parse_number("2147483647") == 2147483647
    assert parse_number("-2147483648") == -2147483648


@pytest.mark.parametrize(
    "word",
    ["2147483648", "-2147483649", "99999999999999999999999", "", "-", "+", "1a", " 1", "1 ", "--1", "+-1", "١٢"],
)
def test_parse_number_rejects(word):
    with pytest.raises(InputError):
        parse_number(word)


def test_input_error_message():
    with pytest.raises(InputError) as info:
        parse_number("x")
    assert str(info.value) == "Error"
    assert isinstance(info.value, ValueError)


def test_single_argument_is_split_on_spaces():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]
    assert parse_arguments(["  5   6 "]) == [5, 6]


def test_several_arguments():
    assert parse_arguments(["3", "2", "1"]) == [3, 2, 1]
    assert parse_arguments(["-4", "+8"]) == [-4, 8]


def test_no_arguments_give_empty_list():
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["   "],
        ["1 2", "3"],
        ["1", ""],
        ["1\t2"],
        ["1 2 1"],
        ["0", "-0"],
        ["4", "+4"],
        ["1 two 3"],
        ["2147483648 1"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(InputError):
        parse_arguments(args)