"""Absolute clock-time resolution.

Turns "3pm", "14:05" or "9" into the time remaining until that clock reading
next occurs. Unmarked readings that already passed this morning are taken to
mean the afternoon; anything still in the past rolls over to tomorrow.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from ..clock.arithmetic import elapsed_between
from ..errors import InvalidFormatError
from .duration import parse_field

logger = logging.getLogger(__name__)


class Meridiem(Enum):
    """Explicit am/pm marker on a clock time."""

    AM = "am"
    PM = "pm"
    UNSPECIFIED = ""


@dataclass(frozen=True)
class ClockTimeSpec:
    """A wall-clock reading without a date.

    Attributes:
        hour: Hour as written (1-12 with a meridiem, 0-23 without).
        minute: Minute, 0-59.
        meridiem: Explicit am/pm marker, if any.
    """

    hour: int
    minute: int
    meridiem: Meridiem = Meridiem.UNSPECIFIED

    def normalized_hour(self, now: datetime) -> int:
        """Return the 24-hour hour this reading refers to, relative to now."""
        if self.meridiem == Meridiem.AM:
            return 0 if self.hour == 12 else self.hour
        if self.meridiem == Meridiem.PM:
            return self.hour if self.hour == 12 else self.hour + 12

        already_passed = self.hour < now.hour or (
            self.hour == now.hour and self.minute < now.minute
        )
        if already_passed and self.hour < 12:
            return self.hour + 12
        return self.hour


def parse_clock_time(text: str) -> ClockTimeSpec:
    """Parse "h", "h:mm", optionally suffixed with am/pm.

    Args:
        text: Clock time string.

    Returns:
        The parsed ClockTimeSpec.

    Raises:
        InvalidFormatError: On malformed fields or out-of-range values.
    """
    body = text.strip()
    meridiem = Meridiem.UNSPECIFIED
    for candidate in (Meridiem.AM, Meridiem.PM):
        if body.lower().endswith(candidate.value):
            meridiem = candidate
            body = body[: -len(candidate.value)].rstrip()
            break

    parts = body.split(":")
    if len(parts) == 1:
        parts.append("00")
    elif len(parts) != 2:
        raise InvalidFormatError(f"Invalid time format: {text!r}", value=text)

    hour = parse_field(parts[0].strip(), "hour", text)
    minute = parse_field(parts[1].strip(), "minute", text)

    if meridiem == Meridiem.UNSPECIFIED:
        if hour > 23:
            raise InvalidFormatError(f"Invalid hour: {hour}", value=text, field="hour")
    elif not 1 <= hour <= 12:
        raise InvalidFormatError(
            f"Invalid hour for {meridiem.value}: {hour}", value=text, field="hour"
        )
    if minute > 59:
        raise InvalidFormatError(f"Invalid minute: {minute}", value=text, field="minute")

    return ClockTimeSpec(hour=hour, minute=minute, meridiem=meridiem)


def next_occurrence(spec: ClockTimeSpec, now: datetime) -> datetime:
    """Return the next instant strictly after now showing this clock reading."""
    candidate = now.replace(
        hour=spec.normalized_hour(now), minute=spec.minute, second=0, microsecond=0, fold=0
    )
    # Rolling over keeps the clock reading; the UTC offset follows the new date
    while elapsed_between(now, candidate) <= timedelta(0):
        candidate += timedelta(days=1)
    return candidate


def resolve_absolute(text: str, now: datetime) -> timedelta:
    """Resolve a clock time into the duration until it next occurs.

    Args:
        text: Clock time string (e.g. "3pm", "14:05", "9").
        now: Current local time.

    Returns:
        Positive real elapsed duration from now until the target.

    Raises:
        InvalidFormatError: If the string is not a valid clock time.

    Examples:
        >>> resolve_absolute("3pm", datetime(2024, 1, 15, 14, 0))
        datetime.timedelta(seconds=3600)
    """
    spec = parse_clock_time(text)
    target = next_occurrence(spec, now)
    logger.debug(f"Resolved {text!r} to {target.isoformat()} ({spec})")
    return elapsed_between(now, target)


__all__ = [
    "ClockTimeSpec",
    "Meridiem",
    "next_occurrence",
    "parse_clock_time",
    "resolve_absolute",
]
