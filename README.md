# minixpm

A small pure-Python reader for XPM images. Colour names are resolved
through the X11 colour-name table, and each image comes back as an
`XpmImage` whose `pixels` are a flat tuple of 32-bit values, row by row.
The package also holds the small text, number, byte and line-reading
helpers that the reader is built from.

## Installation

```
pip install minixpm
```

With the test dependencies:

```
pip install "minixpm[test]"
```

## Reading an image

```python
from minixpm.xpm import load_xpm, parse_xpm_text, parse_xpm_lines, XpmError

image = load_xpm("sprite.xpm")
print(image.width, image.height)
print(hex(image.pixel(0, 0)))   # IndexError outside the image
```

- `load_xpm(path)` reads a file and decodes it. An unreadable file raises
  `OSError`.
- `parse_xpm_text(text)` takes the text of an XPM file. C-style comments
  outside string literals are blanked with `strip_comments` first, then the
  double-quoted strings are decoded.
- `parse_xpm_lines(lines)` takes the strings themselves: the header
  (width, height, colour count, characters per pixel), the colour
  definitions, then the pixel rows.

Data that cannot be decoded (a missing or invalid header, a colour
definition without a `c` key, too few lines, a short pixel row) raises
`XpmError`, a subclass of `ValueError`.

Colours come out as `0xRRGGBB`. A colour given as `None` is stored as
`0xFF000000`, which marks a transparent pixel. A pixel whose key is not in
the colour definitions is 0.

## Colours

```python
from minixpm.colors import lookup_color, color_names
from minixpm.xpm import text_to_rgb

lookup_color("Dodger Blue")   # 0x1e90ff; ASCII case is ignored
lookup_color("none")          # -1
text_to_rgb("#ff8800", None)  # hexadecimal colours
text_to_rgb("no such", None)  # unknown names give 0
```

`lookup_color` raises `KeyError` for an unknown name; `color_names()`
returns every distinct name in table order.

## Helpers

- `minixpm.wordtab`: `find_substring`, `find_unquoted` (skips text inside
  double quotes) and `split_words` (splits on spaces and tabs).
- `minixpm.text`: `split`, `trim`, `substring`, `join`, `find_bounded`,
  `find_char`, `rfind_char`, `compare_prefix`, `bounded_copy`,
  `bounded_concat`, `map_indexed` and `iter_indexed`.
- `minixpm.numbers`: `atoi`, which reads a leading decimal integer and wraps
  the result to 32 bits, and `itoa`.
- `minixpm.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`; each takes a character code or a
  one-character string.
- `minixpm.memory`: `find_byte` and `compare_bytes` over bytes-like objects.
- `minixpm.output`: `put_char`, `put_str`, `put_endl` and `put_number`,
  writing to a given text stream or to standard output.
- `minixpm.linereader`: `LineReader`, which reads a text or binary stream
  line by line through a fixed-size buffer, and `read_lines`.

## What it does not do

The package only reads XPM images. It does not write XPM files, does not
display or render images, and has no command-line tool.

## Running the tests

```
pytest
```