"""nag entry point.

Usage:
    nag [OPTIONS] WHEN TARGET MESSAGE...

Options:
    -e, --estimate     Print the target time and exit
    --config PATH      Path to YAML config file
    --log-level LEVEL  Override the configured log level
    --mock-speech      Record the message instead of speaking it
    --help             Show this help message
    --version          Show version
"""

import argparse
import logging
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .clock import SystemClock
from .config.loader import load_config
from .errors import ConfigError, InvalidFormatError, SpeechInvocationError, UnsupportedModeError
from .scheduler import NagRequest, NotificationScheduler
from .timing import resolve_target
from .tts import create_speaker

logger = logging.getLogger("nag")


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="nag",
        description="Reminds you after a specified duration by speaking a message",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nag in 5 tea is ready           # 5 minutes from now
  nag in 1:30 check the oven      # 1 minute 30 seconds
  nag in 1:00:00 stand up         # 1 hour
  nag at 3pm call back            # next 3:00pm
  nag at 9:15 -e standup          # print when, don't wait

Environment:
  NAG_CONFIG       Path to YAML config file
  NAG_LOG_LEVEL    Log level (DEBUG, INFO, WARNING, ...)
""",
    )

    parser.add_argument(
        "-e",
        "--estimate",
        action="store_true",
        help="print nag time estimate based on duration provided",
    )

    parser.add_argument("when", help="When to nag: 'in' or 'at'")

    parser.add_argument(
        "target",
        help="Duration in hh:mm:ss, mm:ss, or mm format ('in'), or a clock time "
        "like 3pm or 14:05 ('at')",
    )

    parser.add_argument(
        "message",
        nargs="+",
        help="Message to speak when time has elapsed",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )

    parser.add_argument(
        "--log-level",
        help="Override the configured log level",
        metavar="LEVEL",
    )

    parser.add_argument(
        "--mock-speech",
        action="store_true",
        help="Record the message instead of speaking it (for testing)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nag v{__version__}",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for nag.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()
    args = parse_args(argv)

    try:
        config = load_config(path=args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.logging.level)
    logger.debug(f"nag v{__version__}")

    clock = SystemClock()

    resolved_at = clock.now()
    try:
        duration = resolve_target(args.when, args.target, resolved_at)
    except (UnsupportedModeError, InvalidFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    request = NagRequest(
        duration=duration,
        message=" ".join(args.message),
        estimate_only=args.estimate,
    )

    speaker = create_speaker(config.speech, use_mock=args.mock_speech or config.testing.mock_speech)
    scheduler = NotificationScheduler(
        clock=clock,
        speech=speaker,
        stale_threshold=timedelta(seconds=config.scheduler.stale_threshold_seconds),
    )

    try:
        scheduler.run(request, resolved_at=resolved_at)
    except SpeechInvocationError as e:
        logger.error(f"Speech failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted while waiting")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
