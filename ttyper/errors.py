"""Exceptions raised while loading the configuration."""


class ConfigError(Exception):
    """Raised when a configuration file is present but cannot be used."""


class StyleParseError(ConfigError):
    """Raised when a color or style string cannot be parsed.

    Attributes:
        value: The offending text.
        expected: Description of what was expected instead.
    """

    def __init__(self, value: str, expected: str, message: str | None = None) -> None:
        self.value = value
        self.expected = expected
        super().__init__(message or f"invalid value: string {value!r}, expected {expected}")


class UnrecognizedColorError(StyleParseError):
    """Raised for a value that is neither a color name nor a hex code."""

    def __init__(self, value: str) -> None:
        super().__init__(value, "a color name or hexadecimal color code")


class InvalidColorError(StyleParseError):
    """Raised for a six character color code that is not valid hexadecimal."""

    def __init__(self, value: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            value,
            "a color name or hexadecimal color code",
            f"color code was not valid hexadecimal: {value!r} ({reason})",
        )


class InvalidModifierError(StyleParseError):
    """Raised for an unknown style modifier."""

    def __init__(self, value: str) -> None:
        super().__init__(value, "a style modifier")
