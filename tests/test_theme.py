import pytest

from tacradio.theme import (
    Color,
    Palette,
    Theme,
    background_color,
    display_color,
    indicator_color,
    meter_color,
    palette,
    panel_color,
    style_sheet,
    text_color,
    theme_from_name,
    theme_name,
    theme_names,
)


@pytest.mark.parametrize(
    "theme, expected",
    [
        (Theme.MILITARY_OLIVE, "#3B3B2F"),
        (Theme.NAVY_GREY, "#2C3E50"),
        (Theme.NIGHT_MODE, "#1A0000"),
        (Theme.DESERT_TAN, "#BDAE93"),
        (Theme.BLACK_OPS, "#101010"),
    ],
)
def test_background_colors(theme, expected):
    assert background_color(theme).name().upper() == expected


@pytest.mark.parametrize(
    "theme, expected",
    [
        (Theme.MILITARY_OLIVE, "#4A4A3D"),
        (Theme.NAVY_GREY, "#34495E"),
        (Theme.NIGHT_MODE, "#2D0000"),
        (Theme.DESERT_TAN, "#D2C3A8"),
        (Theme.BLACK_OPS, "#202020"),
    ],
)
def test_panel_colors(theme, expected):
    assert panel_color(theme).name().upper() == expected


def test_text_display_and_meter_colors():
    assert text_color(Theme.MILITARY_OLIVE).name().upper() == "#F4E6D7"
    assert display_color(Theme.MILITARY_OLIVE).name().upper() == "#FF6B00"
    assert display_color(Theme.DESERT_TAN).name().upper() == "#0064C8"
    assert meter_color(Theme.MILITARY_OLIVE).name().upper() == "#FFD700"
    assert meter_color(Theme.NIGHT_MODE).name().upper() == "#FF3333"


def test_active_indicator_colors():
    assert indicator_color(Theme.DESERT_TAN, True).name().upper() == "#FFA500"
    assert indicator_color(Theme.BLACK_OPS, True).name().upper() == "#00FFFF"


@pytest.mark.parametrize("theme", list(Theme))
def test_inactive_indicator_is_dimmed_text(theme):
    dim = indicator_color(theme, False)
    assert dim == text_color(theme).darker(300)
    assert max(dim.r, dim.g, dim.b) < max(
        text_color(theme).r, text_color(theme).g, text_color(theme).b
    )


def test_theme_names_order():
    assert theme_names() == [
        "Military Olive",
        "Navy Grey",
        "Night Mode",
        "Desert Tan",
        "Black Ops",
    ]


@pytest.mark.parametrize("theme", list(Theme))
def test_theme_name_round_trip(theme):
    assert theme_from_name(theme_name(theme)) is theme


def test_unknown_name_defaults_to_olive():
    assert theme_from_name("Hot Pink") is Theme.MILITARY_OLIVE
    assert theme_from_name("") is Theme.MILITARY_OLIVE


@pytest.mark.parametrize("theme", list(Theme))
def test_palette_roles(theme):
    pal = palette(theme)
    assert isinstance(pal, Palette)
    assert pal.window == background_color(theme)
    assert pal.window_text == text_color(theme)
    assert pal.base == panel_color(theme)
    assert pal.button == panel_color(theme)
    assert pal.alternate_base == panel_color(theme).darker(110)
    assert pal.bright_text == text_color(theme).lighter(120)
    assert pal.highlight == indicator_color(theme, True)
    assert pal.highlighted_text == Color(0, 0, 0)


@pytest.mark.parametrize("theme", list(Theme))
def test_style_sheet_contains_base_and_theme_rules(theme):
    css = style_sheet(theme)
    assert "QSlider::handle:horizontal" in css
    assert "min-width: 80px;" in css
    assert "QPushButton#startStopButton:checked" in css
    assert background_color(theme).name().upper() in css
    assert css.index("font-size: 12px;") < css.index(background_color(theme).name().upper())
    assert css.count("{") == css.count("}")


def test_down_arrow_styled_only_for_olive():
    assert "border-top: none;" in style_sheet(Theme.MILITARY_OLIVE)
    assert "border-top: none;" not in style_sheet(Theme.NAVY_GREY)


def test_desert_tan_checked_button_has_white_text():
    css = style_sheet(Theme.DESERT_TAN)
    block = css[css.index("QPushButton#startStopButton:checked"):]
    block = block[: block.index("}")]
    assert "color: #FFFFFF;" in block


def test_darker_and_lighter_identity_factors():
    c = Color(120, 80, 40)
    assert c.darker(100) == c
    assert c.lighter(100) == c
    assert c.darker(0) == c
    assert c.lighter(-5) == c


def test_factor_below_hundred_swaps_direction():
    c = Color(90, 60, 30)
    assert c.darker(50) == c.lighter(200)
    assert c.lighter(50) == c.darker(200)


def test_darker_keeps_gray_gray():
    d = Color(100, 100, 100).darker(200)
    assert d.r == d.g == d.b
    assert d.r < 100


def test_lighter_saturates_to_white():
    assert Color(200, 200, 200).lighter(200) == Color(255, 255, 255)


def test_alpha_preserved():
    c = Color(10, 20, 30, 40)
    assert c.darker(150).a == 40
    assert c.lighter(150).a == 40


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)