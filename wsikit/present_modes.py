"""Compatibility between presentation modes."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable

from wsikit.log import log_error

MAX_PRESENT_MODES = 6


class PresentMode(enum.IntEnum):
    """Presentation modes a swapchain can use."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3
    SHARED_DEMAND_REFRESH = 1000111000
    SHARED_CONTINUOUS_REFRESH = 1000111001


@dataclasses.dataclass(frozen=True)
class PresentModeCompatibility:
    """A presentation mode and the modes it can be switched to."""

    present_mode: PresentMode
    compatible_present_modes: tuple[PresentMode, ...]

    def __post_init__(self) -> None:
        modes = tuple(self.compatible_present_modes)
        if len(modes) > MAX_PRESENT_MODES:
            raise ValueError(f"at most {MAX_PRESENT_MODES} compatible present modes allowed")
        object.__setattr__(self, "compatible_present_modes", modes)

    @property
    def present_mode_count(self) -> int:
        return len(self.compatible_present_modes)


class CompatiblePresentModes:
    """Table of presentation-mode compatibilities for one surface type."""

    def __init__(self, compatibilities: Iterable[PresentModeCompatibility] = ()) -> None:
        self._table: dict[int, PresentModeCompatibility] = {}
        for entry in compatibilities:
            self._table.setdefault(entry.present_mode, entry)

    def _lookup(self, present_mode: PresentMode) -> PresentModeCompatibility | None:
        entry = self._table.get(present_mode)
        if entry is None:
            log_error(
                "Querying compatible presentation mode support for a presentation mode "
                "that is not supported."
            )
        return entry

    def query(
        self, present_mode: PresentMode, capacity: int | None = None
    ) -> tuple[PresentMode, ...]:
        """Return the modes compatible with ``present_mode``.

        With ``capacity`` None all of them are returned; otherwise at most
        ``capacity`` of them, in table order. Raises ValueError for a mode
        the table does not support.
        """
        entry = self._lookup(present_mode)
        if entry is None:
            raise ValueError(f"unsupported present mode: {present_mode!r}")
        modes = entry.compatible_present_modes
        if capacity is None:
            return modes
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        return modes[:capacity]

    def is_compatible(self, present_mode_a: PresentMode, present_mode_b: PresentMode) -> bool:
        """Return True if ``present_mode_b`` is compatible with ``present_mode_a``."""
        entry = self._lookup(present_mode_a)
        if entry is None:
            return False
        return present_mode_b in entry.compatible_present_modes