"""
Utility functions for TabletGUI.
"""

from .logger import setup_logging, log_level_for
from .validators import resolve_driver_path, validate_driver_installed

__all__ = ["setup_logging", "log_level_for", "resolve_driver_path", "validate_driver_installed"]
