"""Byte-buffer and bounded-string helpers in the spirit of the C memory routines."""

from itertools import zip_longest

_SIZE_MAX = 2**64 - 1


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if any(count > length for length in lengths):
        raise ValueError("count exceeds the buffer length")


def find_byte(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in ``data[:count]``.

    ``value`` is reduced to an unsigned byte first. Returns None if absent.
    """
    _check_count(count, len(data))
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(count, len(first), len(second))
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def copy_bytes(destination: bytearray, source: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``source`` to the start of ``destination``."""
    _check_count(count, len(destination), len(source))
    destination[:count] = source[:count]
    return destination


def move_bytes(buffer: bytearray, destination: int, source: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``source`` to ``destination``.

    Overlapping regions are handled correctly.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - destination, len(buffer) - source)
    if count and destination != source:
        buffer[destination:destination + count] = buffer[source:source + count]
    return buffer


def fill_bytes(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (as an unsigned byte)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero_bytes(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    fill_bytes(buffer, 0, count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and _SIZE_MAX // count < size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``source``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(source)
    return source[:size - 1], len(source)


def bounded_concat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``destination`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had;
    when ``size`` is not larger than ``destination`` that length is
    ``size + len(source)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(destination):
        total = len(destination) + len(source)
    else:
        total = size + len(source)
    room = max(0, size - len(destination) - 1)
    return destination + source[:room], total


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the difference of the first differing character codes, treating
    the end of a string as a NUL character, or 0 if the prefixes match.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    for left, right in zip_longest(first[:count], second[:count], fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
        if left == "\0":
            return 0
    return 0


def find_char(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``.

    Searching for NUL finds the end of the string. Returns None if absent.
    """
    if len(char) != 1:
        raise ValueError("char must be a single character")
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def find_last_char(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``.

    Searching for NUL finds the end of the string. Returns None if absent.
    """
    if len(char) != 1:
        raise ValueError("char must be a single character")
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index