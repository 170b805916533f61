import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
". c None",
// pixels
"a.",
".a"};
"""


def test_split_words():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_quotes():
    text = '/* hi */"a/*b*/"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hi" not in result
    assert result.endswith('"a/*b*/"')


def test_strip_line_comment_blanks_newline():
    text = 'x // note\n"y"'
    result = strip_comments(text)
    assert result == "x" + " " * 8 + '"y"'


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("#zz") == 0


def test_text_to_rgb_names():
    assert text_to_rgb("red") == 0xFF0000
    assert text_to_rgb("None") == -1
    assert text_to_rgb("ghost", "white") == 0xF8F8FF
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_sample():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == (
        (0xFF0000, TRANSPARENT),
        (TRANSPARENT, 0xFF0000),
    )
    assert image.pixel(1, 1) == 0xFF0000


def test_rgba_bytes():
    image = parse_xpm_text(SAMPLE)
    data = image.to_rgba_bytes()
    assert len(data) == 4 * image.width * image.height
    assert data[:4] == bytes((255, 0, 0, 255))
    assert data[4:8] == bytes((0, 0, 0, 0))


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixels == ((0xFF,),)


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixels == ((0xFF0000,),)


def test_undefined_key_is_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "b"])
    assert image.pixels == ((0,),)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_load_xpm(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)
    assert isinstance(load_xpm(path), XpmImage) and load_xpm(path).width == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")