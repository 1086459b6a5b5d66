"""Platform detection for speech engine selection.

Detects the current platform to select the text-to-speech command.
"""

import platform as platform_module
from enum import Enum, auto


class Platform(Enum):
    """Detected platform for speech engine selection."""

    MACOS = auto()
    LINUX = auto()
    WINDOWS = auto()
    OTHER = auto()


def detect_platform() -> Platform:
    """Detect the current platform for speech engine selection.

    Returns:
        Platform enum indicating the detected platform:
        - MACOS for Darwin systems
        - LINUX for Linux (any architecture)
        - WINDOWS for Windows
        - OTHER for all other platforms

    This function never raises exceptions.
    """
    system = platform_module.system()

    if system == "Darwin":
        return Platform.MACOS
    elif system == "Linux":
        return Platform.LINUX
    elif system == "Windows":
        return Platform.WINDOWS
    else:
        return Platform.OTHER


__all__ = ["Platform", "detect_platform"]
