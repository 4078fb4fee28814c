"""
Errors raised while saving or loading a configuration file.
"""

from typing import Optional


class ConfigurationError(Exception):
    """Base class for configuration file errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigurationError):
    """The config file could not be opened, read or written."""
    pass


class ConfigParseError(ConfigurationError):
    """The config file is not a well-formed configuration document."""

    def __init__(self, message: str, path: Optional[str] = None,
                 line: Optional[int] = None):
        super().__init__(message, path)
        self.line = line


class ConfigTypeMismatchError(ConfigurationError):
    """A setting's value cannot be converted to or from its declared type."""

    def __init__(self, element: str, text: str, expected: str,
                 path: Optional[str] = None):
        super().__init__(
            f"Invalid value for {element}: {text!r} is not a valid {expected}",
            path,
        )
        self.element = element
        self.text = text
        self.expected = expected
