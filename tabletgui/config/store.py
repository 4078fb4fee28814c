"""
Saving and loading configuration files.

Every failure is reported as a ConfigurationError subclass. The file
handle is always closed before an error propagates.
"""

import logging
import os
from typing import Union

from .configuration import Configuration
from .errors import ConfigIOError, ConfigurationError
from .xml_codec import decode_configuration, encode_configuration

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ConfigurationStore:
    """Read and write Configuration XML files."""

    @staticmethod
    def save(configuration: Configuration, path: PathLike) -> None:
        """
        Write a configuration to a file, replacing any existing file.

        No validation is performed; every setting is written as it is.

        Args:
            configuration: Configuration to write
            path: Destination file

        Raises:
            ConfigIOError: If the file cannot be opened or written
            ConfigTypeMismatchError: If a setting holds a value of the
                wrong type. The file may be left truncated.
        """
        path = os.fspath(path)
        try:
            with open(path, "wb") as stream:
                stream.write(encode_configuration(configuration))
        except ConfigurationError as e:
            e.path = path
            raise
        except OSError as e:
            raise ConfigIOError(f"Failed to write configuration to {path}: {e}", path) from e

        logger.info(f"Saved configuration to {path}")

    @staticmethod
    def load(path: PathLike) -> Configuration:
        """
        Read a configuration from a file.

        Settings missing from the file keep their default value.

        Args:
            path: File to read

        Returns:
            Loaded configuration

        Raises:
            ConfigIOError: If the file does not exist or cannot be read
            ConfigParseError: If the file is not a configuration document
            ConfigTypeMismatchError: If a setting's value cannot be converted
        """
        path = os.fspath(path)
        try:
            with open(path, "rb") as stream:
                configuration = decode_configuration(stream.read())
        except ConfigurationError as e:
            e.path = path
            raise
        except OSError as e:
            raise ConfigIOError(f"Failed to read configuration from {path}: {e}", path) from e

        logger.info(f"Loaded configuration from {path}")
        return configuration


def save_configuration(configuration: Configuration, path: PathLike) -> None:
    """Write a configuration to a file. See ConfigurationStore.save."""
    ConfigurationStore.save(configuration, path)


def load_configuration(path: PathLike) -> Configuration:
    """Read a configuration from a file. See ConfigurationStore.load."""
    return ConfigurationStore.load(path)
