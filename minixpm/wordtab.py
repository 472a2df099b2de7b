"""Substring search and word splitting helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def find_substring(text: str, needle: str, limit: int) -> int:
    """Return the index of the first occurrence of ``needle`` in ``text``.

    Returns -1 when ``needle`` is longer than ``limit`` or does not occur.
    """
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find_substring`, but skip matches inside double quotes.

    Every ``"`` character toggles the quoted state; quotes are not escaped.
    """
    if len(needle) > limit:
        return -1
    last_start = len(text) - len(needle)
    quoted = False
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]