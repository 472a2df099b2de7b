"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_OVERFLOW_GUARD = 922337203685477580


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text with no digits yields 0. A magnitude past the 64-bit range
    yields -1 for positive and 0 for negative input; other results wrap to a
    32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    for char in text[pos:]:
        if char not in _DIGITS:
            break
        if value > _OVERFLOW_GUARD or (value == _OVERFLOW_GUARD and char > "7"):
            return 0 if negative else -1
        value = value * 10 + int(char)
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return f"{n:d}"