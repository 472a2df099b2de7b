import pytest

from minixpm.colors import color_names, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("black", 0x0),
        ("gray100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_values(name, expected):
    assert lookup_color(name) == expected


def test_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_non_ascii_case_is_not_folded():
    # The Kelvin sign lowercases to "k" in Unicode but is not an ASCII letter.
    with pytest.raises(KeyError):
        lookup_color("\u212Ahaki")


def test_names_are_unique_and_lowercase():
    names = color_names()
    assert len(names) == len(set(names))
    assert all(name == name.lower() for name in names)
    assert "none" in names
    assert names[0] == "snow"


def test_every_name_round_trips_in_upper_case():
    for name in color_names():
        assert lookup_color(name.upper()) == lookup_color(name)


def test_values_fit_in_rgb():
    for name in color_names():
        value = lookup_color(name)
        assert value == -1 or 0 <= value <= 0xFFFFFF