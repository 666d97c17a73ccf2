"""Parsing of compact style strings.

A style string has the form ``fg[:bg][;modifier[;modifier...]]``. Either color
may be ``none`` or empty to leave it unset, e.g. ``"none:blue;bold;italic"``.
"""

from __future__ import annotations

from rich.color import Color
from rich.style import Style

from ttyper.colors import parse_color
from ttyper.errors import InvalidModifierError

NO_COLOR_VALUES: frozenset[str] = frozenset({"none", ""})

# Modifier names mapped to the corresponding Rich style attribute
MODIFIERS: dict[str, str] = {
    "bold": "bold",
    "crossed_out": "strike",
    "dim": "dim",
    "hidden": "conceal",
    "italic": "italic",
    "rapid_blink": "blink2",
    "slow_blink": "blink",
    "reversed": "reverse",
    "underlined": "underline",
}


def parse_style(value: str) -> Style:
    """Parse a style string into a Rich style.

    Args:
        value: Style string such as ``"00ff00:000000;bold;dim"``.

    Returns:
        Style with the parsed foreground, background and modifiers.

    Raises:
        StyleParseError: If a color or modifier is not recognized.
    """
    colors, _, modifiers = value.partition(";")
    fg, has_bg, bg = colors.partition(":")
    if not has_bg:
        bg = "none"

    style = Style(color=_parse_optional_color(fg), bgcolor=_parse_optional_color(bg))

    for modifier in _split_modifiers(modifiers):
        attribute = MODIFIERS.get(modifier)
        if attribute is None:
            raise InvalidModifierError(modifier)
        style += Style(**{attribute: True})

    return style


def _parse_optional_color(value: str) -> Color | None:
    if value in NO_COLOR_VALUES:
        return None
    return parse_color(value)


def _split_modifiers(modifiers: str) -> list[str]:
    """Split the modifier section, ignoring one trailing separator."""
    parts = modifiers.split(";")
    if parts[-1] == "":
        parts.pop()
    return parts
