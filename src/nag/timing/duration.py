"""Relative duration parsing.

Turns colon-delimited strings like "5", "1:30" or "1:01:01" into a timedelta.
"""

import logging
import re
from datetime import timedelta

from ..errors import InvalidFormatError

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

# Field names by arity: 1 field is minutes, 2 is mm:ss, 3 is hh:mm:ss
_FIELD_LAYOUTS: dict[int, tuple[str, ...]] = {
    1: ("minutes",),
    2: ("minutes", "seconds"),
    3: ("hours", "minutes", "seconds"),
}

_FIELD_SECONDS = {"hours": 3600, "minutes": 60, "seconds": 1}


def parse_field(raw: str, field: str, value: str) -> int:
    """Parse one non-negative integer component.

    Args:
        raw: The component text.
        field: Component name, used in the error message.
        value: The full input string, carried on the error.

    Returns:
        The parsed integer.

    Raises:
        InvalidFormatError: If the component is empty, not all ASCII digits,
            or too long to convert.
    """
    if not _DIGITS.fullmatch(raw):
        raise InvalidFormatError(f"Invalid {field}: {raw!r}", value=value, field=field)
    try:
        return int(raw)
    except ValueError as e:
        # Beyond the interpreter's integer string conversion limit
        raise InvalidFormatError(
            f"Invalid {field}: too many digits", value=value, field=field
        ) from e


def parse_relative(text: str) -> timedelta:
    """Parse a relative duration into a timedelta.

    Args:
        text: Duration as "mm", "mm:ss" or "hh:mm:ss".

    Returns:
        Elapsed duration, whole seconds.

    Raises:
        InvalidFormatError: On a wrong field count, a non-numeric field, or a
            total beyond what timedelta can hold.

    Examples:
        >>> parse_relative("1:30")
        datetime.timedelta(seconds=90)
        >>> parse_relative("45")
        datetime.timedelta(seconds=2700)
    """
    parts = text.strip().split(":")
    layout = _FIELD_LAYOUTS.get(len(parts))
    if layout is None:
        raise InvalidFormatError(f"Invalid duration format: {text!r}", value=text)

    total = 0
    for raw, field in zip(parts, layout):
        total += parse_field(raw, field, text) * _FIELD_SECONDS[field]

    try:
        duration = timedelta(seconds=total)
    except OverflowError as e:
        raise InvalidFormatError(f"Duration too large: {text!r}", value=text) from e

    logger.debug(f"Parsed duration {text!r} as {total}s")
    return duration


__all__ = ["parse_field", "parse_relative"]
