"""Color parsing for theme values.

Colors are written either as one of the sixteen terminal color names (plus
``reset`` for the terminal default) or as a six digit hexadecimal code
without a leading ``#``::

    parse_color("lightblue")  # Color.parse("bright_blue")
    parse_color("00ff00")     # Color.from_rgb(0, 255, 0)

Values are returned as Rich colors so they can be used directly by the
rendering layer.
"""

from __future__ import annotations

import re

from rich.color import Color

from ttyper.errors import InvalidColorError, UnrecognizedColorError

RESET_COLOR_NAME = "reset"

# Config names mapped to Rich's standard color names (ANSI 0-15)
NAMED_COLORS: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "gray": "white",
    "darkgray": "bright_black",
    "lightred": "bright_red",
    "lightgreen": "bright_green",
    "lightyellow": "bright_yellow",
    "lightblue": "bright_blue",
    "lightmagenta": "bright_magenta",
    "lightcyan": "bright_cyan",
    "white": "bright_white",
}

HEX_CODE_LENGTH = 6
HEX_PAIR_PATTERN = re.compile(r"[0-9A-Fa-f]{2}")


def parse_color(value: str) -> Color:
    """Parse a color name or hexadecimal color code.

    Args:
        value: Color name (case-sensitive), ``reset``, or a six digit hex code.

    Returns:
        The matching Rich color.

    Raises:
        InvalidColorError: If a six character value is not valid hexadecimal.
        UnrecognizedColorError: If the value is neither a name nor a hex code.
    """
    if value == RESET_COLOR_NAME:
        return Color.default()

    rich_name = NAMED_COLORS.get(value)
    if rich_name is not None:
        return Color.parse(rich_name)

    if len(value) == HEX_CODE_LENGTH:
        red, green, blue = (_parse_hex_pair(value, value[i : i + 2]) for i in range(0, HEX_CODE_LENGTH, 2))
        return Color.from_rgb(red, green, blue)

    raise UnrecognizedColorError(value)


def _parse_hex_pair(value: str, pair: str) -> int:
    """Parse one two digit channel of a hex color code.

    Args:
        value: The full color code, for error reporting.
        pair: The two characters to parse.

    Returns:
        The channel value (0-255).
    """
    # int(..., 16) also accepts signs, whitespace and underscores
    if not HEX_PAIR_PATTERN.fullmatch(pair):
        raise InvalidColorError(value, f"{pair!r} is not a hexadecimal byte")
    return int(pair, 16)
