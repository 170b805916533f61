import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("navy", 0x80),
    ],
)
def test_known_values(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NONE") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("lemon chiffon") == lookup_color("lemonchiffon")
    assert lookup_color("dark orange") == lookup_color("darkorange")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_match(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_ramp_is_monotonic():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("green1") == lookup_color("green")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not-a-colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")