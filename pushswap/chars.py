"""Classification and case conversion of single ASCII character codes."""


def is_alpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """Return True if ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Map an uppercase ASCII letter to lowercase; other codes pass through."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def to_upper(code: int) -> int:
    """Map a lowercase ASCII letter to uppercase; other codes pass through."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code