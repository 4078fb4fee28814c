"""
Validation utilities for TabletGUI.
"""

from pathlib import Path
from typing import Optional, Tuple

from ..config import Configuration


def resolve_driver_path(configuration: Configuration, base_dir: Path) -> Path:
    """
    Get the absolute path of the driver executable.

    A relative driver path is relative to the GUI installation directory.

    Args:
        configuration: Configuration holding the driver path
        base_dir: GUI installation directory

    Returns:
        Absolute driver path
    """
    driver_path = Path(configuration.driver_path)
    if not driver_path.is_absolute():
        driver_path = Path(base_dir) / driver_path
    return driver_path.resolve()


def validate_driver_installed(configuration: Configuration,
                              base_dir: Path) -> Tuple[bool, Optional[Path]]:
    """
    Check if the driver executable exists.

    Args:
        configuration: Configuration holding the driver path
        base_dir: GUI installation directory

    Returns:
        Tuple of (is_installed, driver_path)
        If not installed, driver_path is None
    """
    if not configuration.driver_path:
        return False, None

    driver_path = resolve_driver_path(configuration, base_dir)
    if not driver_path.is_file():
        return False, None

    return True, driver_path
