"""
Configuration management for TabletGUI.

This module defines the tablet driver settings, their defaults, and their
persistence as XML files.
"""

from .configuration import Configuration, new_configuration
from .defaults import CURRENT_CONFIG_VERSION, DEFAULT_CONFIGURATION
from .errors import (
    ConfigIOError,
    ConfigParseError,
    ConfigTypeMismatchError,
    ConfigurationError,
)
from .manager import ConfigurationManager
from .store import ConfigurationStore, load_configuration, save_configuration
from .types import Area, OutputMode

__all__ = [
    "Area",
    "OutputMode",
    "Configuration",
    "new_configuration",
    "CURRENT_CONFIG_VERSION",
    "DEFAULT_CONFIGURATION",
    "ConfigurationError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigTypeMismatchError",
    "ConfigurationStore",
    "load_configuration",
    "save_configuration",
    "ConfigurationManager",
]
