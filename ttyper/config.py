"""Configuration file loading for the ttyper TUI."""

from __future__ import annotations

import dataclasses
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from rich.style import Style

from ttyper.errors import ConfigError, StyleParseError
from ttyper.logger import get_logger
from ttyper.styles import parse_style

logger = get_logger(__name__)

CONFIG_FILE_NAME = "config.toml"

DEFAULT_LANGUAGE = Path("english200")
DEFAULT_LEXER = "extended-grapheme-clusters"
DEFAULT_MAX_MISALIGNMENT = 8


@dataclass(frozen=True)
class Theme:
    """Style bindings for UI elements.

    Every field is a ``rich.style.Style`` read from a style string in the
    ``[theme]`` table. There are no bindings yet; add fields here (or in a
    subclass) to make them configurable.
    """

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], *, path: str = "theme") -> Theme:
        """Create a theme from a mapping, keeping defaults for missing keys.

        Args:
            data: Contents of the ``[theme]`` table.
            path: Dotted location of the table, used in error messages.

        Returns:
            A Theme instance.

        Raises:
            ConfigError: If a value is not a valid style string.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        _warn_unknown_keys(data, known, path)

        values: dict[str, Style] = {}
        for name in known:
            if name not in data:
                continue
            raw = data[name]
            if not isinstance(raw, str):
                raise ConfigError(f"{path}.{name}: expected a style string, got {raw!r}")
            try:
                values[name] = parse_style(raw)
            except StyleParseError as exc:
                raise ConfigError(f"{path}.{name}: {exc}") from exc

        return cls(**values)


@dataclass(frozen=True)
class Config:
    """Application configuration, fully populated with defaults."""

    default_language: Path = DEFAULT_LANGUAGE
    default_lexer: str = DEFAULT_LEXER
    max_misalignment: int = DEFAULT_MAX_MISALIGNMENT
    theme: Theme = field(default_factory=Theme)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Config:
        """Create a config from a parsed TOML document.

        Keys that are absent keep their default value. Keys that are present
        must have the right type.

        Args:
            data: Parsed TOML document.

        Returns:
            A Config instance.

        Raises:
            ConfigError: If a value has the wrong type or cannot be parsed.
        """
        _warn_unknown_keys(data, {f.name for f in dataclasses.fields(cls)}, None)
        defaults = cls()

        default_language = defaults.default_language
        if "default_language" in data:
            default_language = Path(_require_str(data, "default_language"))

        default_lexer = defaults.default_lexer
        if "default_lexer" in data:
            default_lexer = _require_str(data, "default_lexer")

        max_misalignment = defaults.max_misalignment
        if "max_misalignment" in data:
            max_misalignment = _require_non_negative_int(data, "max_misalignment")

        theme = defaults.theme
        if "theme" in data:
            raw_theme = data["theme"]
            if not isinstance(raw_theme, Mapping):
                raise ConfigError(f"theme: expected a table, got {raw_theme!r}")
            theme = type(defaults.theme).from_mapping(raw_theme)

        return cls(
            default_language=default_language,
            default_lexer=default_lexer,
            max_misalignment=max_misalignment,
            theme=theme,
        )


def get_config_dir() -> Path:
    """Get the directory used for configuration.

    Returns:
        Path to the configuration directory.

    Raises:
        ConfigError: If no home directory can be determined.
    """
    override_dir = os.environ.get("TTYPER_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "ttyper"

    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigError(f"Unable to determine the configuration directory: {exc}") from exc
    return home / ".config" / "ttyper"


def default_config_file_path() -> Path:
    """Get the full path to the default config file.

    Returns:
        Path to the config TOML file.
    """
    return get_config_dir() / CONFIG_FILE_NAME


def load_config(config_path: Path | str | None = None) -> Config:
    """Load the configuration from disk.

    A file that cannot be read is not an error: defaults are returned. A file
    that is read but invalid raises.

    Args:
        config_path: Path to the config file, or None for the default location.

    Returns:
        Loaded config, or defaults if the file cannot be read.

    Raises:
        ConfigError: If the file is not valid TOML or contains invalid values.
    """
    path = Path(config_path) if config_path is not None else default_config_file_path()

    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(f"Could not read config file {path}, using defaults: {exc}")
        return Config()

    try:
        raw = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    try:
        config = Config.from_mapping(raw)
    except ConfigError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    logger.info(f"Loaded config from {path}")
    return config


def _warn_unknown_keys(data: Mapping[str, object], known: set[str], path: str | None) -> None:
    for key in data:
        if key not in known:
            location = f"{path}.{key}" if path else key
            logger.warning(f"Ignoring unknown config key {location!r}")


def _require_str(data: Mapping[str, object], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"{key}: expected a string, got {value!r}")
    return value


def _require_non_negative_int(data: Mapping[str, object], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key}: expected a non-negative integer, got {value!r}")
    return value
