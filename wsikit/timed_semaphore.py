"""A counting semaphore whose wait takes a relative timeout in nanoseconds."""

from __future__ import annotations

import threading

WAIT_FOREVER = 2**64 - 1
_NS_PER_SECOND = 1_000_000_000


class SemaphoreNotReady(Exception):
    """Raised by a non-blocking wait when the count is zero."""


class SemaphoreTimeout(TimeoutError):
    """Raised when a timed wait expires before the semaphore is posted."""


class TimedSemaphore:
    """Counting semaphore measured against a monotonic clock."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("initial count must not be negative")
        self._count = count
        self._cond = threading.Condition(threading.Lock())

    def wait(self, timeout: int | None) -> None:
        """Decrement the count, blocking up to ``timeout`` nanoseconds.

        A timeout of 0 never blocks and raises SemaphoreNotReady if the count
        is zero. ``WAIT_FOREVER`` or None blocks until posted. Any other value
        raises SemaphoreTimeout if it expires first.
        """
        if timeout is not None and not 0 <= timeout <= WAIT_FOREVER:
            raise ValueError("timeout must be in the range 0..2**64-1")
        with self._cond:
            if self._count == 0:
                if timeout == 0:
                    raise SemaphoreNotReady("semaphore count is zero")
                if timeout is None or timeout == WAIT_FOREVER:
                    self._cond.wait_for(lambda: self._count > 0)
                elif not self._cond.wait_for(
                    lambda: self._count > 0, timeout=timeout / _NS_PER_SECOND
                ):
                    raise SemaphoreTimeout("timed out waiting for semaphore")
            self._count -= 1

    def post(self) -> None:
        """Increment the count, waking one waiting thread."""
        with self._cond:
            self._count += 1
            self._cond.notify()