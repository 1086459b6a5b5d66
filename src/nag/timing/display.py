"""Display formatting for resolved targets."""

from datetime import datetime, timedelta

from ..clock.arithmetic import add_elapsed


def format_clock(dt: datetime) -> str:
    """Format a datetime as a 12-hour clock reading.

    Args:
        dt: Datetime to format.

    Returns:
        Time string in format "h:MMam" (e.g., "3:05pm", "12:00am").
    """
    return dt.strftime("%I:%M%p").lstrip("0").lower()


def format_target_time(duration: timedelta, now: datetime) -> str:
    """Format the instant now + duration for display.

    Args:
        duration: Resolved time to wait.
        now: Current local time.

    Returns:
        Clock reading, suffixed with "(tomorrow)" when the target falls on
        a later calendar day.
    """
    target = add_elapsed(now, duration)
    formatted = format_clock(target)
    if target.date() != now.date():
        formatted = f"{formatted} (tomorrow)"
    return formatted.strip()


__all__ = ["format_clock", "format_target_time"]
