import pytest

from wirefdf.colornames import lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("green", 0xFF00),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_duplicate_wins():
    # "dark slate" appears several times; the first entry is the one used.
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_spaced_and_joined_spellings_agree():
    assert lookup_color("lemon chiffon") == lookup_color("lemonchiffon")
    assert lookup_color("gray") == lookup_color("grey")
    assert lookup_color("dark gray") == lookup_color("darkgrey")


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")


@pytest.mark.parametrize("name", ["", "not a colour", "gray101", "snow5"])
def test_unknown_names_raise(name):
    with pytest.raises(KeyError):
        lookup_color(name)


def test_values_fit_in_24_bits():
    for name in ["white", "gray100", "thistle4", "orchid1", "deepskyblue4"]:
        assert 0 <= lookup_color(name) <= 0xFFFFFF