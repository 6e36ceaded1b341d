"""Exceptions raised by binaryscarf."""


class ScarfError(Exception):
    """Base class for all binaryscarf errors."""


class ConfigError(ScarfError, ValueError):
    """A configuration value is out of range or missing."""


class ColorParseError(ScarfError, ValueError):
    """A color literal is not in 0xRRGGBB notation."""


class EmptyInputError(ScarfError, ValueError):
    """The input text has nothing left after filtering."""

    def __init__(self, message: str = "input text is empty after filtering"):
        super().__init__(message)
