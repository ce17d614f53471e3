# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Union

from rich.color import Color as RichColor
from rich.style import Style

from compact_calendar.exceptions import UnknownColorError

# Color constants for the calendar frame
HEADER_COLOR = "dark_orange"
GUTTER_COLOR = "sandy_brown"

# Brightness factor applied to a color's background on dimmed days
DIMMED_FACTOR = 0.7
# Share of white mixed into a color for its light_ variant
LIGHT_FACTOR = 0.4


class Color(StrEnum):
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    RED = "red"
    CYAN = "cyan"
    GRAY = "gray"
    LIGHT_ORANGE = "light_orange"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_GREEN = "light_green"
    LIGHT_BLUE = "light_blue"
    LIGHT_PURPLE = "light_purple"
    LIGHT_RED = "light_red"
    LIGHT_CYAN = "light_cyan"
    LIGHT_GRAY = "light_gray"


# Ayu dark palette
_BASE_RGB: dict[str, tuple[int, int, int]] = {
    "orange": (0xFF, 0x8F, 0x40),
    "yellow": (0xE6, 0xB4, 0x50),
    "green": (0xAA, 0xD9, 0x4C),
    "blue": (0x59, 0xC2, 0xFF),
    "purple": (0xD2, 0xA6, 0xFF),
    "red": (0xF0, 0x71, 0x78),
    "cyan": (0x95, 0xE6, 0xCB),
    "gray": (0x8A, 0x91, 0x99),
}


def _lighten(rgb: tuple[int, int, int]) -> tuple[int, int, int]:
    r, g, b = rgb
    return (
        int(r + (255 - r) * LIGHT_FACTOR),
        int(g + (255 - g) * LIGHT_FACTOR),
        int(b + (255 - b) * LIGHT_FACTOR),
    )


def _dim(rgb: tuple[int, int, int]) -> tuple[int, int, int]:
    r, g, b = rgb
    return (int(r * DIMMED_FACTOR), int(g * DIMMED_FACTOR), int(b * DIMMED_FACTOR))


def color_rgb(color: Color) -> tuple[int, int, int]:
    """Return the (r, g, b) triple used as the background of a color."""
    name = str(color)
    if name.startswith("light_"):
        return _lighten(_BASE_RGB[name.removeprefix("light_")])
    return _BASE_RGB[name]


def color_from_name(name: Union[str, Color]) -> Color:
    """Return the Color for a configuration name such as "light_blue".

    Raises:
        UnknownColorError: If the name is not one of the sixteen colors
    """
    if isinstance(name, Color):
        return name
    if not isinstance(name, str):
        raise UnknownColorError(name)
    try:
        return Color(name.strip().lower())
    except ValueError:
        raise UnknownColorError(name)


def highlight_style(color: Color, dimmed: bool = False) -> Style:
    """Black text on the color's background, darker when dimmed."""
    rgb = color_rgb(color)
    if dimmed:
        rgb = _dim(rgb)
    return Style(color="black", bgcolor=RichColor.from_rgb(*rgb))


def day_style(
    color: Union[Color, None],
    dimmed: bool,
    struck: bool,
    underlined: bool,
) -> Style:
    """Compose the style of one day cell.

    A colored day gets its highlight background (dimmed background when
    dimmed); an uncolored day is rendered with reduced intensity instead.
    Strikethrough and underline combine with either.
    """
    decoration = Style(
        strike=True if struck else None,
        underline=True if underlined else None,
    )
    if color is not None:
        return highlight_style(color, dimmed) + decoration
    return Style(dim=True if dimmed else None) + decoration
