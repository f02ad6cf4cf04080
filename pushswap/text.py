"""String helpers: integer parsing and formatting, splitting, trimming and mapping."""

from collections.abc import Callable, MutableSequence
from itertools import takewhile

_WHITESPACE = "\t\n\v\f\r "
_LLONG_MAX = 2**63 - 1


def _to_c_int(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. If the magnitude exceeds a 64-bit signed integer, -1 is returned
    for positive input and 0 for negative input. Otherwise the result wraps to
    a signed 32-bit value.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for digit in takewhile(lambda ch: "0" <= ch <= "9", rest):
        result = result * 10 + int(digit)
        if result > _LLONG_MAX:
            return 0 if sign < 0 else -1
    return _to_c_int(result * sign)


def int_to_str(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(separator) if piece]


def trim(text: str, chars: str) -> str:
    """Remove any characters found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of ``needle`` in the first ``limit`` characters of ``haystack``.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def for_each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace each item of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)