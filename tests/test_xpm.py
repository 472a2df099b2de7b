import pytest

from minixpm.colors import lookup_color
from minixpm.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

CHECKER = ["2 2 2 1", ". c #000000", "# c #ffffff", ".#", "#."]

XPM_FILE = """/* XPM */
static char *checker[] = {
/* width height ncolors cpp */
"2 2 2 1",
". c #000000",
"# c #ffffff",
// pixels
".#",
"#."
};
"""


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff0000", None) == 0xFF0000


def test_text_to_rgb_named():
    assert text_to_rgb("red", None) == lookup_color("red")


def test_text_to_rgb_ignores_case():
    assert text_to_rgb("ReD", None) == lookup_color("red")


def test_text_to_rgb_joins_two_words():
    assert text_to_rgb("dark", "red") == lookup_color("dark red")


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_text_to_rgb_none_is_transparent():
    assert text_to_rgb("None", None) == -1


def test_strip_comments_blanks_block_comment():
    text = "/* c */x"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert result.strip() == "x"


def test_strip_comments_keeps_quoted_comment():
    text = '"/*x*/"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    result = strip_comments("// hi\nx")
    assert result.strip() == "x"


def test_parse_lines_checker():
    image = parse_xpm_lines(CHECKER)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == (0x000000, 0xFFFFFF, 0xFFFFFF, 0x000000)


def test_pixel_access():
    image = parse_xpm_lines(CHECKER)
    assert image.pixel(1, 0) == 0xFFFFFF
    assert image.pixel(0, 0) == 0x000000


def test_pixel_out_of_range():
    image = parse_xpm_lines(CHECKER)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_undefined_pixel_key_is_zero():
    image = parse_xpm_lines(["2 1 1 1", ". c #ffffff", ".?"])
    assert image.pixels == (0xFFFFFF, 0)


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", ". c #ff0000", ". c #00ff00", "."])
    assert image.pixels == (0x00FF00,)


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #ff0000", "abc c #00ff00", "abc"])
    assert image.pixels == (0xFF0000,)


def test_multi_character_pixels():
    image = parse_xpm_lines(["2 1 2 2", "aa c #0000ff", "bb c #00ff00", "bbaa"])
    assert image.pixels == (0x00FF00, 0x0000FF)


def test_zero_width_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["0 2 1 1", ". c #000000", "", ""])


def test_short_header_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["2 2 1"])


def test_missing_c_key_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", ". m #000000", "."])


def test_c_key_without_colour_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", ". c", "."])


def test_missing_rows_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(CHECKER[:-1])


def test_short_row_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["2 1 1 1", ". c #000000", "."])


def test_parse_text_matches_lines():
    assert parse_xpm_text(XPM_FILE) == parse_xpm_lines(CHECKER)


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "checker.xpm"
    path.write_text(XPM_FILE)
    assert load_xpm(path) == parse_xpm_lines(CHECKER)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")