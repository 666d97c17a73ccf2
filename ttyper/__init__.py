"""ttyper configuration loading and style parsing."""

from ttyper.colors import parse_color
from ttyper.config import Config, Theme, default_config_file_path, load_config
from ttyper.errors import (
    ConfigError,
    InvalidColorError,
    InvalidModifierError,
    StyleParseError,
    UnrecognizedColorError,
)
from ttyper.styles import parse_style

__all__ = [
    "Config",
    "ConfigError",
    "InvalidColorError",
    "InvalidModifierError",
    "StyleParseError",
    "Theme",
    "UnrecognizedColorError",
    "default_config_file_path",
    "load_config",
    "parse_color",
    "parse_style",
]
