"""Mock clock for testing.

Provides a controllable clock whose sleep() advances time instantly.
"""

from datetime import UTC, datetime, timedelta

from .arithmetic import add_elapsed


class MockClock:
    """Mock clock for testing.

    Time only moves when sleep() or advance() is called, and moves in real
    elapsed time, so a DST change is reflected in the local reading. An
    optional oversleep simulates a host that was suspended during the wait.
    """

    def __init__(self, start: datetime, oversleep: timedelta | None = None) -> None:
        """Initialize mock clock.

        Args:
            start: Initial local time (naive values are taken as UTC)
            oversleep: Extra time added on every sleep() call
        """
        if start.tzinfo is None:
            start = start.replace(tzinfo=UTC)
        self._now = start
        self._oversleep = oversleep or timedelta(0)
        self._sleeps: list[timedelta] = []

    def now(self) -> datetime:
        """Get current mock time."""
        return self._now

    def sleep(self, duration: timedelta) -> None:
        """Record the sleep and advance time without blocking."""
        self._sleeps.append(duration)
        self._now = add_elapsed(self._now, duration + self._oversleep)

    def advance(self, duration: timedelta) -> None:
        """Move time forward."""
        self._now = add_elapsed(self._now, duration)

    @property
    def sleeps(self) -> list[timedelta]:
        """Get list of requested sleep durations."""
        return self._sleeps.copy()


__all__ = ["MockClock"]
