"""Sets of window-system platforms stored as a 64-bit mask."""

from __future__ import annotations

import enum


class WsiPlatform(enum.IntEnum):
    """Window-system platforms known to the loader interface."""

    MIR = 0
    WAYLAND = 1
    WIN32 = 2
    XCB = 3
    XLIB = 4
    ANDROID = 5
    MACOS = 6
    IOS = 7
    DISPLAY = 8
    HEADLESS = 9
    METAL = 10
    DIRECTFB = 11
    VI = 12
    GGP = 13
    SCREEN = 14
    FUCHSIA = 15


def _bit(platform: int) -> int:
    value = int(platform)
    if not 0 <= value < 64:
        raise ValueError(f"platform value {value} is outside 0..63")
    return 1 << value


class WsiPlatformSet:
    """A set of platforms, each one a bit of a 64-bit integer."""

    def __init__(self) -> None:
        self._mask = 0

    def add(self, platform: WsiPlatform | int) -> None:
        """Add a platform to the set."""
        self._mask |= _bit(platform)

    def __contains__(self, platform: object) -> bool:
        if not isinstance(platform, int):
            return False
        return bool(self._mask & _bit(platform))

    def empty(self) -> bool:
        """Return True if no platform has been added."""
        return self._mask == 0