"""Text-to-speech module for nag.

Provides platform-adaptive speech output through the system's own command:
- macOS: `say`
- Linux: `spd-say` (speech-dispatcher)
- Windows: PowerShell System.Speech
- Other: a speaker that fails when asked to speak
"""

import logging
from typing import TYPE_CHECKING

from .linux import SpdSaySpeaker
from .macos import SaySpeaker
from .mock import MockSpeaker
from .platform import Platform, detect_platform
from .speaker import (
    DEFAULT_TIMEOUT_SECONDS,
    CommandSpeaker,
    SpeechResult,
    SpeechService,
    UnsupportedPlatformSpeaker,
)
from .windows import PowerShellSpeaker

if TYPE_CHECKING:
    from ..config import SpeechConfig

logger = logging.getLogger(__name__)

_PLATFORM_SPEAKERS: dict[Platform, type[CommandSpeaker]] = {
    Platform.MACOS: SaySpeaker,
    Platform.LINUX: SpdSaySpeaker,
    Platform.WINDOWS: PowerShellSpeaker,
}


def create_speaker(
    config: "SpeechConfig | None" = None,
    use_mock: bool = False,
) -> SpeechService:
    """Create the speech service for the current platform.

    Args:
        config: Speech configuration (optional)
        use_mock: If True, force mock speaker for testing

    Returns:
        SpeechService implementation appropriate for the platform.
        Never returns None; a missing command is reported when speaking.
    """
    if use_mock:
        logger.info("TTS: Using MockSpeaker (requested)")
        return MockSpeaker()

    platform = detect_platform()
    logger.debug(f"TTS: Detected platform: {platform.name}")

    speaker_cls = _PLATFORM_SPEAKERS.get(platform)
    if speaker_cls is None:
        logger.warning(f"TTS: No speech command for platform {platform.name}")
        return UnsupportedPlatformSpeaker(platform.name)

    voice = None
    rate = None
    timeout = DEFAULT_TIMEOUT_SECONDS
    if config is not None:
        voice = config.voice
        rate = config.rate
        timeout = config.timeout_seconds

    speaker = speaker_cls(voice=voice, rate=rate, timeout=timeout)
    if speaker.is_available:
        logger.info(f"TTS: Using {speaker_cls.__name__}")
    else:
        logger.warning(f"TTS: {speaker_cls.BINARY} command not found on PATH")
    return speaker


__all__ = [
    "MockSpeaker",
    "Platform",
    "PowerShellSpeaker",
    "SaySpeaker",
    "SpdSaySpeaker",
    "SpeechResult",
    "SpeechService",
    "UnsupportedPlatformSpeaker",
    "create_speaker",
    "detect_platform",
]
