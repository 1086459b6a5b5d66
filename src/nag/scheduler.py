"""Notification scheduling.

Implements the wait-then-decide protocol: show the target time, block until
it arrives, then speak the message unless the wakeup is stale.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from .clock import Clock, add_elapsed, elapsed_between
from .timing import format_target_time
from .tts import SpeechService

logger = logging.getLogger(__name__)

DEFAULT_STALE_THRESHOLD = timedelta(seconds=30)


class NagState(Enum):
    """State of a nag request."""

    RESOLVED = "resolved"
    WAITING = "waiting"
    FIRED = "fired"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class NagRequest:
    """A fully resolved reminder.

    Attributes:
        duration: Time to wait before speaking.
        message: Text to speak.
        estimate_only: If True, only display the target time.
    """

    duration: timedelta
    message: str
    estimate_only: bool = False

    def __post_init__(self) -> None:
        if self.duration < timedelta(0):
            raise ValueError(f"Nag duration must be non-negative, got {self.duration}")


@dataclass
class NagOutcome:
    """What happened to a nag request.

    Attributes:
        state: Final state (FIRED or SKIPPED).
        target_at: Instant the message was meant for.
        display: Line shown to the user.
        woke_at: When the wait ended, None for estimate-only requests.
    """

    state: NagState
    target_at: datetime
    display: str
    woke_at: datetime | None = None

    @property
    def drift(self) -> timedelta | None:
        """How far from the target the wakeup landed."""
        if self.woke_at is None:
            return None
        return abs(elapsed_between(self.target_at, self.woke_at))


class NotificationScheduler:
    """Runs a single nag request to completion.

    Blocks the calling thread for the whole wait; there is no cancellation.
    """

    def __init__(
        self,
        clock: Clock,
        speech: SpeechService,
        stale_threshold: timedelta = DEFAULT_STALE_THRESHOLD,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize the scheduler.

        Args:
            clock: Source of "now" and the blocking sleep.
            speech: Service used to speak the message.
            stale_threshold: Maximum distance between the wakeup and the
                target for the message to still be spoken.
            output: Callable receiving the display line.
        """
        self._clock = clock
        self._speech = speech
        self._stale_threshold = stale_threshold
        self._output = output
        self._state = NagState.RESOLVED

    @property
    def state(self) -> NagState:
        """Get current scheduler state."""
        return self._state

    def is_stale(self, target_at: datetime, now: datetime) -> bool:
        """Check whether a wakeup at now is too far from target_at to notify."""
        return abs(elapsed_between(target_at, now)) >= self._stale_threshold

    def run(self, request: NagRequest, resolved_at: datetime | None = None) -> NagOutcome:
        """Display, wait for, and deliver a nag request.

        Args:
            request: The resolved request.
            resolved_at: Instant the duration was resolved against. The
                target is anchored here; defaults to a fresh clock reading.

        Returns:
            NagOutcome describing the final state.

        Raises:
            SpeechInvocationError: If speaking the message fails.
        """
        started_at = resolved_at if resolved_at is not None else self._clock.now()
        target_at = add_elapsed(started_at, request.duration)
        display = format_target_time(request.duration, started_at)
        self._output(display)

        if request.estimate_only:
            logger.info("Estimate only, not waiting")
            self._state = NagState.SKIPPED
            return NagOutcome(state=self._state, target_at=target_at, display=display)

        self._state = NagState.WAITING
        logger.info(f"Waiting {request.duration} until {target_at.isoformat(timespec='seconds')}")
        self._clock.sleep(request.duration)

        woke_at = self._clock.now()
        outcome = NagOutcome(
            state=NagState.SKIPPED, target_at=target_at, display=display, woke_at=woke_at
        )

        # The host may have been suspended during the wait; speaking a message
        # long after its moment would only confuse.
        if self.is_stale(target_at, woke_at):
            logger.warning(
                f"Woke {outcome.drift} away from target {target_at.isoformat(timespec='seconds')}, "
                "not speaking"
            )
            self._state = NagState.SKIPPED
            return outcome

        self._speech.speak(request.message)
        self._state = NagState.FIRED
        outcome.state = NagState.FIRED
        logger.info("Message spoken")
        return outcome


__all__ = [
    "DEFAULT_STALE_THRESHOLD",
    "NagOutcome",
    "NagRequest",
    "NagState",
    "NotificationScheduler",
]
