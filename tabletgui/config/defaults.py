"""
Default configuration values for TabletGUI.

These are the values a new configuration starts from, and the values kept
for every setting missing from a loaded config file.
"""

from .types import Area, OutputMode

CURRENT_CONFIG_VERSION = 1

DEFAULT_CONFIGURATION = {
    "config_version": CURRENT_CONFIG_VERSION,

    # Tablet area
    "tablet_area": Area(80, 45, 40, 22.5),
    "tablet_full_area": Area(100, 50, 50, 25),
    "force_aspect_ratio": True,
    "rotation": 0.0,
    "invert": False,
    "force_full_area": True,
    "output_mode": OutputMode.ABSOLUTE,

    # Screen map
    "screen_area": Area(0, 0, 0, 0),

    # Smoothing filter
    "smoothing_enabled": False,
    "smoothing_latency": 0.0,
    "smoothing_interval": 4,

    # Noise filter
    "noise_filter_enabled": False,
    "noise_filter_buffer": 10,
    "noise_filter_threshold": 0.5,

    # Anti-smoothing filter
    "anti_smoothing_enabled": False,
    "anti_smoothing_shape": 0.5,
    "anti_smoothing_compensation": 4.0,
    "anti_smoothing_ignore_when_dragging": False,

    # Desktop
    "desktop_size": Area(0, 0, 0, 0),
    "automatic_desktop_size": True,

    # Buttons
    "button_map": [1, 2, 3],
    "disable_buttons": False,

    # Commands run by the driver before and after the generated settings
    "commands_after": [""],
    "commands_before": [""],

    # Window settings
    "window_width": 700,
    "window_height": 710,

    "automatic_restart": True,
    "run_at_startup": False,

    # Driver launch
    "driver_path": "bin/TabletDriverService.exe",
    "driver_arguments": "config/init.cfg",

    "debugging_enabled": False,
    "developer_mode": False,
}
