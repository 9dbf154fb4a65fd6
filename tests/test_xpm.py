import pytest

from ftxpm.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

SAMPLE = [
    "2 2 2 1",
    ". c #FF0000",
    "# c None",
    ".#",
    "#.",
]

XPM_FILE = """/* XPM */
static char *tex[] = {
/* columns rows colors chars-per-pixel */
"3 1 3 2 ",
"aa c red",
"bb c #00FF00",   // green
"cc c dark red",
/* pixels */
"aabbcc"
};
"""


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("#ff8000", None) == 0xFF8000


def test_text_to_rgb_hex_without_digits():
    assert text_to_rgb("#") == 0


def test_text_to_rgb_named():
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("RED", None) == text_to_rgb("red", None)


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("dark", "red") == 0x8B0000


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_strip_comments_block():
    text = "a /* b */ c"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["a", "c"]


def test_strip_comments_keeps_quoted():
    text = '"/*keep*/"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment_through_newline():
    text = "x // y\nz"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.split() == ["x", "z"]


def test_strip_comments_unterminated_block():
    text = "a /*b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert result.startswith("a ")


def test_parse_lines_pixels():
    image = parse_xpm_lines(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == (
        (0xFF0000, TRANSPARENT),
        (TRANSPARENT, 0xFF0000),
    )


def test_none_colour_becomes_transparent_value():
    image = parse_xpm_lines(["1 1 1 1", ". c None", "."])
    assert image.pixels == ((0xFF000000,),)


def test_unknown_pixel_key_is_zero():
    image = parse_xpm_lines(["2 1 1 1", ". c #00FF00", ".x"])
    assert image.pixels == ((0x00FF00, 0),)


def test_direct_palette_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", ". c red", ". c blue", "."])
    assert image.pixels == ((text_to_rgb("blue"),),)


def test_wide_palette_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixels == ((text_to_rgb("red"),),)


def test_two_char_keys():
    image = parse_xpm_lines(["2 1 2 2", "ab c #010203", "cd c None", "cdab"])
    assert image.pixels == ((TRANSPARENT, 0x010203),)


def test_header_extra_words_ignored():
    image = parse_xpm_lines(["1 1 1 1 0 0", ". c #0000FF", "."])
    assert image == XpmImage(1, 1, ((0x0000FF,),))


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", ". c red", "."],
        ["1 1", ". c red", "."],
        ["1 -1 1 1", ". c red", "."],
        ["1 1 1 1", ". s red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 1 1 2", ".", ".."],
        ["2 1 1 1", ". c red", "."],
        ["1 2 1 1", ". c red", "."],
        ["1 1 2 1", ". c red"],
        [],
    ],
)
def test_malformed_data_rejected(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_xpm_error_is_value_error():
    with pytest.raises(ValueError):
        parse_xpm_lines(["bad"])


def test_parse_text_with_comments():
    image = parse_xpm_text(XPM_FILE)
    assert (image.width, image.height) == (3, 1)
    assert image.pixels == ((0xFF0000, 0x00FF00, 0x8B0000),)


def test_parse_text_matches_lines():
    text = "{\n" + ",\n".join(f'"{line}"' for line in SAMPLE) + "\n};\n"
    assert parse_xpm_text(text) == parse_xpm_lines(SAMPLE)


def test_parse_text_without_strings():
    with pytest.raises(XpmError):
        parse_xpm_text("/* nothing here */")


def test_load_xpm(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(XPM_FILE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(XPM_FILE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_xpm(tmp_path / "missing.xpm")