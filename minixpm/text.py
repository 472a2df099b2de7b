"""String helpers: splitting, trimming, bounded searches, copies and comparisons."""

from __future__ import annotations

from typing import Callable, Optional


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected one character, got {c!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Return the two strings joined end to end."""
    return first + second


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle is found at 0. Returns None when there is no match.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def find_char(text: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` yields the length of ``text``.
    """
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index == -1 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` yields the length of ``text``.
    """
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index == -1 else index


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` leading characters; return -1, 0 or 1."""
    _check_non_negative("n", n)
    a, b = first[:n], second[:n]
    return (a > b) - (a < b)


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative("size", size)
    return src[: max(size - 1, 0)], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed the length of ``dest``, nothing is appended
    and the reported length is ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(text: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``text``."""
    for index, char in enumerate(text):
        func(index, char)