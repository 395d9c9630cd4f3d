"""Character-class tests and case conversion on ASCII character codes."""


def is_alnum(code: int) -> bool:
    """True when ``code`` is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_alpha(code: int) -> bool:
    """True when ``code`` is an ASCII letter."""
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(code: int) -> bool:
    """True when ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_digit(code: int) -> bool:
    """True when ``code`` is an ASCII decimal digit."""
    return 48 <= code <= 57


def is_print(code: int) -> bool:
    """True when ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Return the lower-case code for an upper-case ASCII letter, else ``code``."""
    return code + 32 if 65 <= code <= 90 else code


def to_upper(code: int) -> int:
    """Return the upper-case code for a lower-case ASCII letter, else ``code``."""
    return code - 32 if 97 <= code <= 122 else code