"""
Configuration management for TabletGUI.

Finds the user's config file, loads it with a fallback to defaults, and
saves changes made in the GUI.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .configuration import Configuration, new_configuration
from .defaults import CURRENT_CONFIG_VERSION
from .errors import ConfigIOError, ConfigurationError
from .store import ConfigurationStore

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.xml"


class ConfigurationManager:
    """
    Application configuration manager.

    Handles the configuration stored in the user's config directory.

    Path:
        Linux/macOS: ~/.config/tabletgui/config.xml
        Windows: %APPDATA%\\tabletgui\\config.xml
    """

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Override the default config file location
        """
        if config_file is not None:
            self.config_file = Path(config_file)
        else:
            self.config_file = self._get_config_dir() / CONFIG_FILE_NAME
        self.config_dir = self.config_file.parent

        self._configuration: Optional[Configuration] = None
        self.last_error: Optional[ConfigurationError] = None

    @staticmethod
    def _get_config_dir() -> Path:
        """
        Get platform-specific configuration directory.

        Returns:
            Path to configuration directory
        """
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(base) / 'tabletgui'

    @property
    def configuration(self) -> Configuration:
        """Current configuration, loaded on first access."""
        if self._configuration is None:
            return self.load()
        return self._configuration

    def load(self) -> Configuration:
        """
        Load configuration from file.

        If the file doesn't exist or can't be loaded, uses the default
        configuration. A load failure is kept in last_error so the GUI can
        tell the user why their settings were reset.

        Returns:
            Loaded or default configuration
        """
        self.last_error = None

        if not self.config_file.exists():
            logger.info("No config file found, using defaults")
            self._configuration = new_configuration()
            return self._configuration

        try:
            configuration = ConfigurationStore.load(self.config_file)
        except ConfigurationError as e:
            logger.error(f"Failed to load configuration: {e}, using defaults")
            self.last_error = e
            self._configuration = new_configuration()
            return self._configuration

        if configuration.config_version > CURRENT_CONFIG_VERSION:
            logger.warning(
                f"Config file version {configuration.config_version} is newer than "
                f"supported version {CURRENT_CONFIG_VERSION}"
            )

        self._configuration = configuration
        return self._configuration

    def save(self, configuration: Optional[Configuration] = None) -> None:
        """
        Save configuration to file.

        Creates parent directories if needed.

        Args:
            configuration: Configuration to save (uses current if None)

        Raises:
            ConfigurationError: If the file could not be written
        """
        if configuration is not None:
            self._configuration = configuration

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            ConfigurationStore.save(self.configuration, self.config_file)
        except OSError as e:
            logger.error(f"Failed to create config directory {self.config_dir}: {e}")
            raise ConfigIOError(
                f"Failed to create config directory {self.config_dir}: {e}",
                str(self.config_file),
            ) from e
        except ConfigurationError as e:
            logger.error(f"Failed to save configuration: {e}")
            raise

    def reset_to_defaults(self) -> Configuration:
        """
        Replace the configuration with defaults and save it.

        Returns:
            The new default configuration
        """
        self._configuration = new_configuration()
        self.save()
        return self._configuration
