"""Validation of command-line input into the initial contents of stack ``a``."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.chars import is_digit
from pushswap.text import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """Raised for any invalid input; its message is always ``Error``."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_number(word: str) -> int:
    """Parse an optionally signed decimal integer that fits in 32 bits.

    Raises InputError for anything else, including surrounding spaces.
    """
    digits = word[1:] if word[:1] in ("-", "+") else word
    if not digits or not all(is_digit(ord(char)) for char in digits):
        raise InputError()
    number = int(word)
    if not INT_MIN <= number <= INT_MAX:
        raise InputError()
    return number


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn program arguments into the list of numbers to sort.

    A single argument is split on spaces; several arguments are taken one
    number each. No arguments give an empty list. Raises InputError on an
    empty single argument, a malformed or out-of-range number, or a duplicate.
    """
    if not args:
        return []
    if len(args) == 1:
        if args[0] == "":
            raise InputError()
        words = split(args[0], " ")
        if not words:
            raise InputError()
    else:
        words = list(args)
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        number = parse_number(word)
        if number in seen:
            raise InputError()
        seen.add(number)
        numbers.append(number)
    return numbers