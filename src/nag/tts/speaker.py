"""Speech service protocol and shared command runner.

Defines the interface every platform speaker implements.
"""

import logging
import shutil
import subprocess
import time
from dataclasses import dataclass, field
from typing import Protocol

from ..errors import SpeechInvocationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 120.0


@dataclass
class SpeechResult:
    """Result of speaking a message.

    Attributes:
        command: Command line that was run (empty for mock speakers)
        returncode: Process exit status
        latency_ms: Time spent speaking in milliseconds
    """

    command: list[str] = field(default_factory=list)
    returncode: int = 0
    latency_ms: int = 0


class SpeechService(Protocol):
    """Interface for speaking a message aloud.

    Implementations block until the message has been spoken.
    """

    @property
    def is_available(self) -> bool:
        """Whether the underlying speech command can be found."""
        ...

    def speak(self, text: str) -> SpeechResult:
        """Speak text synchronously.

        Args:
            text: Message to speak

        Returns:
            SpeechResult describing the invocation

        Raises:
            SpeechInvocationError: If the command cannot be launched or fails
        """
        ...


class CommandSpeaker:
    """Base class for speakers that shell out to a text-to-speech binary.

    Subclasses set BINARY and implement build_command().
    """

    BINARY = ""

    def __init__(
        self,
        voice: str | None = None,
        rate: int | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize speaker.

        Args:
            voice: Platform voice name (None for the system default)
            rate: Speech rate in words per minute (None for the default)
            timeout: Seconds to wait for the command to finish
        """
        self._voice = voice
        self._rate = rate
        self._timeout = timeout
        self._binary_path = shutil.which(self.BINARY)

    @property
    def is_available(self) -> bool:
        """Check if the speech binary is on PATH."""
        return self._binary_path is not None

    def build_command(self, text: str) -> list[str]:
        """Build the argument list that speaks text."""
        raise NotImplementedError

    def speak(self, text: str) -> SpeechResult:
        """Run the speech command and wait for it to finish.

        Raises:
            SpeechInvocationError: If the command is missing, times out
                or exits non-zero
        """
        cmd = self.build_command(text)
        logger.debug(f"Running speech command: {cmd[0]} ({len(text)} chars)")
        start_time = time.time()

        try:
            completed = subprocess.run(cmd, check=True, timeout=self._timeout)
        except FileNotFoundError as e:
            raise SpeechInvocationError(
                f"Speech command not found: {cmd[0]}", command=cmd
            ) from e
        except subprocess.TimeoutExpired as e:
            raise SpeechInvocationError(
                f"Speech command timed out after {self._timeout}s", command=cmd
            ) from e
        except subprocess.CalledProcessError as e:
            raise SpeechInvocationError(
                f"Speech command failed with exit status {e.returncode}",
                command=cmd,
                returncode=e.returncode,
            ) from e
        except OSError as e:
            raise SpeechInvocationError(f"Failed to execute speak command: {e}", command=cmd) from e

        latency_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"Spoke message in {latency_ms}ms")
        return SpeechResult(command=cmd, returncode=completed.returncode, latency_ms=latency_ms)


class UnsupportedPlatformSpeaker:
    """Speaker for platforms with no known speech command.

    Construction always succeeds so estimate-only runs work; speaking fails.
    """

    def __init__(self, platform_name: str) -> None:
        self._platform_name = platform_name

    @property
    def is_available(self) -> bool:
        return False

    def speak(self, text: str) -> SpeechResult:
        raise SpeechInvocationError(
            f"No speech command known for platform {self._platform_name}"
        )


__all__ = [
    "CommandSpeaker",
    "DEFAULT_TIMEOUT_SECONDS",
    "SpeechResult",
    "SpeechService",
    "UnsupportedPlatformSpeaker",
]
