"""
Value types shared by the configuration fields.
"""

from dataclasses import dataclass, replace
from enum import IntEnum


class OutputMode(IntEnum):
    """How the driver reports pen position to the system."""
    ABSOLUTE = 0
    RELATIVE = 1
    DIGITIZER = 2

    @property
    def xml_name(self) -> str:
        """Name used for this mode in the config file, e.g. "Relative"."""
        return self.name.capitalize()

    @classmethod
    def from_xml_name(cls, name: str) -> 'OutputMode':
        """
        Look up a mode by its config file name.

        Matching is case-sensitive.

        Raises:
            ValueError: If no mode has that name
        """
        for mode in cls:
            if mode.xml_name == name:
                return mode
        raise ValueError(f"Unknown output mode: {name!r}")


@dataclass
class Area:
    """
    Area in tablet millimeters or screen pixels.

    X and Y are the center of the area, not the top-left corner.
    """
    width: float = 0.0
    height: float = 0.0
    x: float = 0.0
    y: float = 0.0

    def copy(self) -> 'Area':
        """Return an independent copy of this area."""
        return replace(self)
