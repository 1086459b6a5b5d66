"""nag - speak a reminder after a delay or at a clock time.

nag provides:
- Relative targets ("nag in 5:30 tea is ready")
- Absolute targets ("nag at 3pm call back")
- A one-line estimate of when the reminder will fire
- Spoken delivery through the platform's text-to-speech command

Usage:
    nag in 25 stretch
    nag at 14:05 --estimate standup
    python -m nag at 9am take out the bins
"""

__version__ = "0.1.0"

from .config import NagConfig
from .config.loader import load_config
from .errors import InvalidFormatError, NagError, SpeechInvocationError, UnsupportedModeError
from .scheduler import NagOutcome, NagRequest, NagState, NotificationScheduler
from .timing import format_target_time, parse_relative, resolve_absolute, resolve_target

__all__ = [
    "InvalidFormatError",
    "NagConfig",
    "NagError",
    "NagOutcome",
    "NagRequest",
    "NagState",
    "NotificationScheduler",
    "SpeechInvocationError",
    "UnsupportedModeError",
    "__version__",
    "format_target_time",
    "load_config",
    "parse_relative",
    "resolve_absolute",
    "resolve_target",
]
