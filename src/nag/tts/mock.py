"""Mock speaker for testing.

Provides a controllable mock implementation for unit and integration testing.
"""

from ..errors import SpeechInvocationError
from .speaker import SpeechResult


class MockSpeaker:
    """Mock speaker for testing.

    Records spoken messages instead of launching a process.
    """

    def __init__(self, fail: bool = False) -> None:
        """Initialize mock speaker.

        Args:
            fail: If True, every speak() call raises SpeechInvocationError
        """
        self._fail = fail
        self._spoken_texts: list[str] = []

    @property
    def is_available(self) -> bool:
        """Mock speaker is always available."""
        return True

    def speak(self, text: str) -> SpeechResult:
        """Record text as spoken."""
        if self._fail:
            raise SpeechInvocationError("Mock speech failure", command=["mock"])
        self._spoken_texts.append(text)
        return SpeechResult()

    def set_fail(self, fail: bool) -> None:
        """Set whether speak() should fail."""
        self._fail = fail

    @property
    def call_count(self) -> int:
        """Get number of successful speak calls."""
        return len(self._spoken_texts)

    @property
    def spoken_texts(self) -> list[str]:
        """Get list of spoken texts."""
        return self._spoken_texts.copy()

    def clear(self) -> None:
        """Reset mock state."""
        self._spoken_texts.clear()


__all__ = ["MockSpeaker"]
