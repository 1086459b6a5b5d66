"""Elapsed-time arithmetic on local datetimes.

Python adds and subtracts aware datetimes that share a tzinfo on the wall
clock. These helpers go through UTC so a span crossing a DST change
measures real elapsed time. Naive datetimes use plain arithmetic.
"""

from datetime import UTC, datetime, timedelta


def add_elapsed(dt: datetime, duration: timedelta) -> datetime:
    """Return the instant duration after dt, in dt's timezone.

    Raises:
        OverflowError: If the result is outside the datetime range.
    """
    if dt.tzinfo is None:
        return dt + duration
    return (dt.astimezone(UTC) + duration).astimezone(dt.tzinfo)


def elapsed_between(start: datetime, end: datetime) -> timedelta:
    """Return the real time elapsed from start to end."""
    if start.tzinfo is None or end.tzinfo is None:
        return end - start
    return end.astimezone(UTC) - start.astimezone(UTC)


__all__ = ["add_elapsed", "elapsed_between"]
