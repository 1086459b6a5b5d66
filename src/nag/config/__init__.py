"""Configuration module for nag.

This module provides the typed configuration and its YAML loader.
"""

from dataclasses import dataclass, field


@dataclass
class SpeechConfig:
    """Text-to-speech configuration."""

    voice: str | None = None
    rate: int | None = None
    timeout_seconds: float = 120.0


@dataclass
class SchedulerConfig:
    """Wait-then-notify configuration."""

    stale_threshold_seconds: float = 30.0


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class TestingConfig:
    """Testing configuration."""

    mock_speech: bool = False


@dataclass
class NagConfig:
    """Main nag configuration."""

    speech: SpeechConfig = field(default_factory=SpeechConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    testing: TestingConfig = field(default_factory=TestingConfig)


# Public API
__all__ = [
    "LoggingConfig",
    "NagConfig",
    "SchedulerConfig",
    "SpeechConfig",
    "TestingConfig",
]
