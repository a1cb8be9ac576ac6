"""Colour schemes and style sheets for the radio's front panel."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Tuple

_Declarations = Sequence[Tuple[str, str]]
_Rule = Tuple[str, _Declarations]


class Theme(IntEnum):
    """The available panel colour schemes."""

    MILITARY_OLIVE = 0
    NAVY_GREY = 1
    NIGHT_MODE = 2
    DESERT_TAN = 3
    BLACK_OPS = 4


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def _scale_value(self, ratio: float) -> Color:
        h, s, v = colorsys.rgb_to_hsv(self.r / 255, self.g / 255, self.b / 255)
        v *= ratio
        if v > 1.0:
            s = max(0.0, s - (v - 1.0))
            v = 1.0
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return Color(round(r * 255), round(g * 255), round(b * 255), self.a)

    def lighter(self, factor: int = 150) -> Color:
        """Return a brighter colour; a factor of 150 is 50% brighter."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.darker(10000 // factor)
        return self._scale_value(factor / 100)

    def darker(self, factor: int = 200) -> Color:
        """Return a darker colour; a factor of 200 is half as bright."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.lighter(10000 // factor)
        return self._scale_value(100 / factor)

    def name(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Palette:
    """Colours for each role of a widget palette."""

    window: Color
    window_text: Color
    base: Color
    alternate_base: Color
    text: Color
    bright_text: Color
    button: Color
    button_text: Color
    highlight: Color
    highlighted_text: Color


_NAMES = {
    Theme.MILITARY_OLIVE: "Military Olive",
    Theme.NAVY_GREY: "Navy Grey",
    Theme.NIGHT_MODE: "Night Mode",
    Theme.DESERT_TAN: "Desert Tan",
    Theme.BLACK_OPS: "Black Ops",
}

_BACKGROUND = {
    Theme.MILITARY_OLIVE: Color(59, 59, 47),
    Theme.NAVY_GREY: Color(44, 62, 80),
    Theme.NIGHT_MODE: Color(26, 0, 0),
    Theme.DESERT_TAN: Color(189, 174, 147),
    Theme.BLACK_OPS: Color(16, 16, 16),
}

_PANEL = {
    Theme.MILITARY_OLIVE: Color(74, 74, 61),
    Theme.NAVY_GREY: Color(52, 73, 94),
    Theme.NIGHT_MODE: Color(45, 0, 0),
    Theme.DESERT_TAN: Color(210, 195, 168),
    Theme.BLACK_OPS: Color(32, 32, 32),
}

_TEXT = {
    Theme.MILITARY_OLIVE: Color(244, 230, 215),
    Theme.NAVY_GREY: Color(236, 240, 241),
    Theme.NIGHT_MODE: Color(255, 0, 0),
    Theme.DESERT_TAN: Color(51, 51, 51),
    Theme.BLACK_OPS: Color(0, 255, 0),
}

_DISPLAY = {
    Theme.MILITARY_OLIVE: Color(255, 107, 0),   # amber
    Theme.NAVY_GREY: Color(0, 255, 136),        # green phosphor
    Theme.NIGHT_MODE: Color(204, 0, 0),         # deep red
    Theme.DESERT_TAN: Color(0, 100, 200),       # blue LCD
    Theme.BLACK_OPS: Color(0, 255, 255),        # cyan
}

_METER = {
    Theme.MILITARY_OLIVE: Color(255, 215, 0),
    Theme.NAVY_GREY: Color(0, 255, 136),
    Theme.NIGHT_MODE: Color(255, 51, 51),
    Theme.DESERT_TAN: Color(100, 100, 100),
    Theme.BLACK_OPS: Color(0, 255, 0),
}

_INDICATOR = {
    Theme.MILITARY_OLIVE: Color(0, 255, 0),
    Theme.NAVY_GREY: Color(0, 255, 0),
    Theme.NIGHT_MODE: Color(255, 0, 0),
    Theme.DESERT_TAN: Color(255, 165, 0),
    Theme.BLACK_OPS: Color(0, 255, 255),
}

_BASE_RULES: Sequence[_Rule] = (
    ("QMainWindow", (("font-family", '"Arial", sans-serif'), ("font-size", "12px"))),
    ("QGroupBox", (
        ("font-weight", "bold"), ("border", "2px solid"), ("border-radius", "5px"),
        ("margin-top", "10px"), ("padding-top", "10px"),
    )),
    ("QGroupBox::title", (
        ("subcontrol-origin", "margin"), ("left", "10px"), ("padding", "0 5px 0 5px"),
    )),
    ("QPushButton", (
        ("min-height", "30px"), ("min-width", "80px"), ("font-weight", "bold"),
        ("border", "2px solid"), ("border-radius", "4px"), ("padding", "5px"),
    )),
    ("QPushButton:pressed", (("padding", "7px 3px 3px 7px"),)),
    ("QComboBox", (
        ("min-height", "25px"), ("padding", "3px"), ("border", "2px solid"),
        ("border-radius", "4px"),
    )),
    ("QComboBox::drop-down", (("width", "20px"), ("border-left", "2px solid"))),
    ("QComboBox::down-arrow", (("width", "10px"), ("height", "10px"))),
    ("QLabel", (("font-size", "11px"),)),
    ("QSlider::groove:horizontal", (("height", "8px"), ("border-radius", "4px"))),
    ("QSlider::handle:horizontal", (
        ("width", "18px"), ("height", "18px"), ("margin", "-5px 0"),
        ("border-radius", "9px"),
    )),
)


@dataclass(frozen=True)
class _Scheme:
    window: str
    text: str
    group: str
    group_border: str
    button: str
    button_border: str
    hover: str
    pressed: str
    checked: str
    checked_text: str
    groove: str
    groove_border: str
    handle_border: str


_SCHEMES = {
    Theme.MILITARY_OLIVE: _Scheme(
        "#3B3B2F", "#F4E6D7", "#4A4A3D", "#6A6A5D", "#5A5A4D", "#7A7A6D",
        "#6A6A5D", "#4A4A3D", "#FF6B00", "#000000", "#3A3A2D", "#5A5A4D", "#7A7A6D",
    ),
    Theme.NAVY_GREY: _Scheme(
        "#2C3E50", "#ECF0F1", "#34495E", "#546E8A", "#445A74", "#546E8A",
        "#546E8A", "#34495E", "#00FF88", "#000000", "#2C3E50", "#445A74", "#546E8A",
    ),
    Theme.NIGHT_MODE: _Scheme(
        "#1A0000", "#FF0000", "#2D0000", "#660000", "#3D0000", "#660000",
        "#4D0000", "#2D0000", "#FF0000", "#000000", "#1A0000", "#3D0000", "#660000",
    ),
    Theme.DESERT_TAN: _Scheme(
        "#BDAE93", "#333333", "#D2C3A8", "#A08970", "#C5B69C", "#A08970",
        "#D5C6AC", "#B5A68C", "#0064C8", "#FFFFFF", "#BDAE93", "#A08970", "#A08970",
    ),
    Theme.BLACK_OPS: _Scheme(
        "#101010", "#00FF00", "#202020", "#00FF00", "#303030", "#00FF00",
        "#404040", "#202020", "#00FFFF", "#000000", "#101010", "#00FF00", "#00FF00",
    ),
}


def _scheme_rules(theme: Theme) -> list[_Rule]:
    s = _SCHEMES[theme]
    combo: _Declarations = (
        ("background-color", s.button), ("border-color", s.button_border),
        ("color", s.text),
    )
    rules: list[_Rule] = [
        ("QMainWindow", (("background-color", s.window), ("color", s.text))),
        ("QGroupBox", (
            ("background-color", s.group), ("border-color", s.group_border),
            ("color", s.text),
        )),
        ("QPushButton", (
            ("background-color", s.button), ("border-color", s.button_border),
            ("color", s.text),
        )),
        ("QPushButton:hover", (("background-color", s.hover),)),
        ("QPushButton:pressed", (("background-color", s.pressed),)),
        ("QPushButton#startStopButton:checked", (
            ("background-color", s.checked), ("color", s.checked_text),
        )),
        ("QComboBox", combo),
    ]
    if theme is Theme.MILITARY_OLIVE:
        rules += [
            ("QComboBox::drop-down", (("border-color", s.button_border),)),
            ("QComboBox::down-arrow", (
                ("image", "none"), ("border", f"5px solid {s.text}"),
                ("border-top", "none"), ("border-left", "3px solid transparent"),
                ("border-right", "3px solid transparent"),
            )),
        ]
    rules += [
        ("QSlider::groove:horizontal", (
            ("background-color", s.groove), ("border", f"1px solid {s.groove_border}"),
        )),
        ("QSlider::handle:horizontal", (
            ("background-color", s.checked), ("border", f"2px solid {s.handle_border}"),
        )),
    ]
    return rules


def _render(rules: Sequence[_Rule]) -> str:
    blocks = []
    for selector, declarations in rules:
        body = "".join(f"    {prop}: {value};\n" for prop, value in declarations)
        blocks.append(f"{selector} {{\n{body}}}\n")
    return "\n".join(blocks)


def style_sheet(theme: Theme) -> str:
    """Return the full style sheet: the shared base rules, then the theme's."""
    return _render(_BASE_RULES) + "\n" + _render(_scheme_rules(Theme(theme)))


def background_color(theme: Theme) -> Color:
    """Return the window background colour of a theme."""
    return _BACKGROUND[Theme(theme)]


def panel_color(theme: Theme) -> Color:
    """Return the panel colour of a theme."""
    return _PANEL[Theme(theme)]


def text_color(theme: Theme) -> Color:
    """Return the text colour of a theme."""
    return _TEXT[Theme(theme)]


def display_color(theme: Theme) -> Color:
    """Return the frequency display colour of a theme."""
    return _DISPLAY[Theme(theme)]


def meter_color(theme: Theme) -> Color:
    """Return the meter colour of a theme."""
    return _METER[Theme(theme)]


def indicator_color(theme: Theme, active: bool) -> Color:
    """Return an indicator lamp colour; unlit lamps are dimmed text colour."""
    if not active:
        return text_color(theme).darker(300)
    return _INDICATOR[Theme(theme)]


def palette(theme: Theme) -> Palette:
    """Return the widget palette for a theme."""
    bg = background_color(theme)
    panel = panel_color(theme)
    text = text_color(theme)
    return Palette(
        window=bg,
        window_text=text,
        base=panel,
        alternate_base=panel.darker(110),
        text=text,
        bright_text=text.lighter(120),
        button=panel,
        button_text=text,
        highlight=indicator_color(theme, True),
        highlighted_text=Color(0, 0, 0),
    )


def theme_name(theme: Theme) -> str:
    """Return the display name of a theme."""
    return _NAMES[Theme(theme)]


def theme_from_name(name: str) -> Theme:
    """Return the theme with this display name, Military Olive if unknown."""
    for theme, label in _NAMES.items():
        if label == name:
            return theme
    return Theme.MILITARY_OLIVE


def theme_names() -> list[str]:
    """Return the display names of all themes in menu order."""
    return [_NAMES[theme] for theme in Theme]