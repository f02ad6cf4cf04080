"""Formatted text output: a small printf and helpers that write to streams."""

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

_UINT_MASK = 2**32 - 1
_ULLONG_MASK = 2**64 - 1


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "s":
        value = _next_arg(args)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_to_int32(int(_next_arg(args))))
    if spec == "c":
        return _as_char(_next_arg(args))
    if spec == "%":
        return "%"
    if spec == "p":
        return f"0x{int(_next_arg(args)) & _ULLONG_MASK:x}"
    if spec == "x":
        return f"{int(_next_arg(args)) & _UINT_MASK:x}"
    if spec == "X":
        return f"{int(_next_arg(args)) & _UINT_MASK:X}"
    if spec == "u":
        return str(int(_next_arg(args)) & _UINT_MASK)
    return spec


def format_text(template: str, *args: Any) -> str:
    """Expand ``template`` with the conversions %s %d %i %c %% %p %x %X %u.

    An unknown conversion character is written as itself; a lone ``%`` at the
    end is dropped. Raises TypeError if there are too few arguments.
    """
    pieces = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_text(template, *args)
    sys.stdout.write(text)
    return len(text)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _stream(stream).write(_as_char(char))


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` and a newline to ``stream``; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed ``number`` to ``stream``."""
    _stream(stream).write(str(_to_int32(int(number))))