"""Error types for nag.

Parse errors are raised before any output or wait begins; speech errors are
fatal and never retried.
"""


class NagError(Exception):
    """Base exception for nag errors."""

    pass


class InvalidFormatError(NagError, ValueError):
    """Raised when a duration or clock-time string cannot be parsed."""

    def __init__(self, message: str, value: str, field: str | None = None) -> None:
        """Initialize format error.

        Args:
            message: Error message.
            value: The offending input string.
            field: Name of the component that failed (e.g. "minutes"), if known.
        """
        super().__init__(message)
        self.value = value
        self.field = field


class UnsupportedModeError(NagError, ValueError):
    """Raised when the mode selector is neither "in" nor "at"."""

    def __init__(self, mode: str) -> None:
        super().__init__(
            f"Invalid value for 'when': {mode!r}. Only 'in' and 'at' are supported."
        )
        self.mode = mode


class SpeechInvocationError(NagError):
    """Raised when the text-to-speech command cannot be run or fails."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        """Initialize speech error.

        Args:
            message: Error message.
            command: Command line that was attempted.
            returncode: Process exit status, if the process ran.
        """
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode


class ConfigError(NagError):
    """Raised when a configuration file cannot be read or is invalid."""

    pass


__all__ = [
    "ConfigError",
    "InvalidFormatError",
    "NagError",
    "SpeechInvocationError",
    "UnsupportedModeError",
]
