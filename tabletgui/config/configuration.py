"""
The persisted TabletGUI configuration.

A Configuration is a flat record of settings shared by the GUI and the
driver launcher. Every field starts from DEFAULT_CONFIGURATION; callers
change settings by assigning attributes directly.
"""

import copy
from dataclasses import dataclass, field
from typing import List

from .defaults import DEFAULT_CONFIGURATION
from .types import Area, OutputMode


def _default(name: str):
    """Dataclass field whose default is a private copy of the table value."""
    return field(default_factory=lambda: copy.deepcopy(DEFAULT_CONFIGURATION[name]))


@dataclass
class Configuration:
    """Complete tablet driver configuration."""
    config_version: int = _default("config_version")

    # Tablet mapping
    tablet_area: Area = _default("tablet_area")
    tablet_full_area: Area = _default("tablet_full_area")
    force_aspect_ratio: bool = _default("force_aspect_ratio")
    rotation: float = _default("rotation")
    invert: bool = _default("invert")
    force_full_area: bool = _default("force_full_area")
    output_mode: OutputMode = _default("output_mode")

    # Screen mapping
    screen_area: Area = _default("screen_area")

    # Smoothing filter
    smoothing_latency: float = _default("smoothing_latency")
    smoothing_interval: int = _default("smoothing_interval")
    smoothing_enabled: bool = _default("smoothing_enabled")

    # Noise filter
    noise_filter_buffer: int = _default("noise_filter_buffer")
    noise_filter_threshold: float = _default("noise_filter_threshold")
    noise_filter_enabled: bool = _default("noise_filter_enabled")

    # Anti-smoothing filter
    anti_smoothing_shape: float = _default("anti_smoothing_shape")
    anti_smoothing_compensation: float = _default("anti_smoothing_compensation")
    anti_smoothing_ignore_when_dragging: bool = _default("anti_smoothing_ignore_when_dragging")
    anti_smoothing_enabled: bool = _default("anti_smoothing_enabled")

    desktop_size: Area = _default("desktop_size")
    automatic_desktop_size: bool = _default("automatic_desktop_size")

    # Button index 0 is the tip
    button_map: List[int] = _default("button_map")
    disable_buttons: bool = _default("disable_buttons")

    commands_after: List[str] = _default("commands_after")
    commands_before: List[str] = _default("commands_before")

    window_width: int = _default("window_width")
    window_height: int = _default("window_height")

    automatic_restart: bool = _default("automatic_restart")
    run_at_startup: bool = _default("run_at_startup")

    driver_path: str = _default("driver_path")
    driver_arguments: str = _default("driver_arguments")

    debugging_enabled: bool = _default("debugging_enabled")
    developer_mode: bool = _default("developer_mode")

    def copy(self) -> 'Configuration':
        """Return a deep copy that shares no areas or lists with this one."""
        return copy.deepcopy(self)


def new_configuration() -> Configuration:
    """
    Create a configuration populated with the default values.

    Returns:
        A new Configuration; no two calls share mutable state
    """
    return Configuration()
