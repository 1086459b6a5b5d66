"""Time resolution for nag.

Provides the two ways of naming a target:
- "in": a relative duration (mm, mm:ss, hh:mm:ss)
- "at": an absolute clock time (h, h:mm, optional am/pm)
"""

from datetime import datetime, timedelta

from ..clock.arithmetic import add_elapsed
from ..errors import InvalidFormatError, UnsupportedModeError
from .clock_time import (
    ClockTimeSpec,
    Meridiem,
    next_occurrence,
    parse_clock_time,
    resolve_absolute,
)
from .display import format_clock, format_target_time
from .duration import parse_relative

MODE_IN = "in"
MODE_AT = "at"


def resolve_target(mode: str, target: str, now: datetime) -> timedelta:
    """Resolve a target string into the duration to wait.

    Args:
        mode: "in" or "at", case-insensitive.
        target: Duration for "in", clock time for "at".
        now: Current local time.

    Returns:
        Duration from now until the target.

    Raises:
        UnsupportedModeError: If mode is not "in" or "at".
        InvalidFormatError: If target cannot be parsed, or lands outside
            the range of representable dates.
    """
    normalized = mode.strip().lower()
    try:
        if normalized == MODE_IN:
            duration = parse_relative(target)
        elif normalized == MODE_AT:
            duration = resolve_absolute(target, now)
        else:
            raise UnsupportedModeError(mode)
        add_elapsed(now, duration)
    except OverflowError as e:
        raise InvalidFormatError(f"Target time out of range: {target!r}", value=target) from e
    return duration


__all__ = [
    "MODE_AT",
    "MODE_IN",
    "ClockTimeSpec",
    "Meridiem",
    "format_clock",
    "format_target_time",
    "next_occurrence",
    "parse_clock_time",
    "parse_relative",
    "resolve_absolute",
    "resolve_target",
]
