"""Reader for XPM images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator

from minixpm.colors import lookup_color
from minixpm.wordtab import find_substring, find_unquoted, split_words

TRANSPARENT_PIXEL = 0xFF000000

_NAME_BUFFER = 63
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds 32-bit values row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _to_int32(value: int) -> int:
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return ((value + 2**31) % 2**32) - 2**31


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def _atoi(text: str) -> int:
    match = _DECIMAL_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into an RGB value.

    ``#rrggbb`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table; an
    unknown name yields 0 and ``none`` yields -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside string literals with spaces."""
    size = len(text)
    while (begin := find_unquoted(text, "/*", size)) != -1:
        end = find_substring(text[begin + 2 :], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", size)) != -1:
        end = find_substring(text[begin + 2 :], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (opening := text.find('"', pos)) != -1:
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour definition without a colour: {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], end)


def _parse(lines: Iterator[str]) -> XpmImage:
    header = split_words(_next_line(lines, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(header[:4])}")

    # Short keys go through a direct table where later entries overwrite
    # earlier ones; longer keys are searched and the first entry wins.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color_line(_next_line(lines, "colour definition"), cpp)
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    row_length = width * cpp
    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(lines, "pixel row")
        if len(line) < row_length:
            raise XpmError(f"pixel row shorter than {row_length} characters: {line!r}")
        for start in range(0, row_length, cpp):
            color = palette.get(line[start : start + cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its strings: header, colours, then pixel rows."""
    return _parse(iter(lines))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return _parse(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file. OSError propagates if it cannot be read."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_xpm_text(data.decode("latin-1"))