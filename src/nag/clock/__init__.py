"""Clock capability for nag.

Resolution, display and scheduling read "now" and suspend through a Clock
so they can be driven deterministically in tests.
"""

import time
from datetime import datetime, timedelta, tzinfo
from typing import Protocol

from dateutil.tz import tzlocal

from .arithmetic import add_elapsed, elapsed_between
from .mock import MockClock


class Clock(Protocol):
    """Interface for reading wall-clock time and blocking until later."""

    def now(self) -> datetime:
        """Return the current local time, timezone-aware."""
        ...

    def sleep(self, duration: timedelta) -> None:
        """Block the calling thread for the given duration."""
        ...


class SystemClock:
    """Clock backed by the system time zone and time.sleep()."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        """Initialize system clock.

        Args:
            tz: Time zone for local readings (default: the system's own,
                following its DST rules)
        """
        self._tz = tz or tzlocal()

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def sleep(self, duration: timedelta) -> None:
        seconds = duration.total_seconds()
        if seconds > 0:
            time.sleep(seconds)


__all__ = ["Clock", "MockClock", "SystemClock", "add_elapsed", "elapsed_between"]
