"""Ownership of a POSIX file descriptor."""

from __future__ import annotations

import os
from types import TracebackType


class FdOwner:
    """Holds a file descriptor and closes it when done.

    A negative descriptor means nothing is owned.
    """

    def __init__(self, fd: int = -1) -> None:
        self._fd = fd

    def fileno(self) -> int:
        """Return the owned descriptor, or -1 if none."""
        return self._fd

    def is_valid(self) -> bool:
        """Return True if a descriptor is owned."""
        return self._fd >= 0

    def close(self) -> None:
        """Close the owned descriptor, if any."""
        if self.is_valid():
            fd, self._fd = self._fd, -1
            os.close(fd)

    def release(self) -> int:
        """Give up ownership without closing and return the descriptor."""
        fd, self._fd = self._fd, -1
        return fd

    def __enter__(self) -> FdOwner:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_fd", -1) >= 0:
            try:
                os.close(self._fd)
            except OSError:
                pass
            self._fd = -1

    def __repr__(self) -> str:
        return f"FdOwner({self._fd})"