import pytest

from ftxpm.colors import COLORS, NONE_COLOR, color_by_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("ReD") == color_by_name("red")
    assert color_by_name("GHOST WHITE") == color_by_name("ghost white")


def test_first_entry_wins_for_repeated_names():
    # "dark slate" is listed first as darkslategray, later as darkslateblue.
    assert color_by_name("dark slate") == color_by_name("darkslategray")
    assert color_by_name("dark slate") != color_by_name("darkslateblue")


def test_none_is_transparent_marker():
    assert color_by_name("none") == NONE_COLOR
    assert color_by_name("NONE") == -1


def test_unknown_name_gives_none():
    assert color_by_name("not a colour") is None
    assert color_by_name("") is None


def test_non_string_rejected():
    with pytest.raises(TypeError):
        color_by_name(0xFF0000)


def test_values_fit_in_rgb_except_none():
    for name, value in COLORS.items():
        if name == "none":
            continue
        assert 0 <= value <= 0xFFFFFF, name


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_levels_increase():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == color_by_name("black")
    assert values[-1] == color_by_name("white")


def test_mapping_keys_are_lower_case_and_looked_up():
    for key, value in COLORS.items():
        assert key == key.lower()
        assert color_by_name(key.upper()) == value


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        COLORS["red"] = 0  # type: ignore[index]
    assert color_by_name("red") == 0xFF0000