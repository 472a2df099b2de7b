"""ASCII character classification and case conversion.

Each function takes either an integer character code or a one-character
string. The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    return ord(c) if isinstance(c, str) else int(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) < 127


def _shift(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else is returned unchanged."""
    return _shift(c, "A", "Z", 32)


def to_upper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else is returned unchanged."""
    return _shift(c, "a", "z", -32)