"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected one character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as it is."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _target(stream).write(text + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(f"{n:d}")