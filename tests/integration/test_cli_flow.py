"""Integration tests for the command-line flow."""

import re
from collections.abc import Iterator
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from nag.__main__ import main, parse_args
from nag.clock import MockClock
from nag.tts.mock import MockSpeaker

TARGET_LINE = re.compile(r"^\d{1,2}:\d{2}(am|pm)( \(tomorrow\))?$")
START = datetime(2024, 1, 15, 14, 0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the user's environment and config directory."""
    monkeypatch.delenv("NAG_CONFIG", raising=False)
    monkeypatch.delenv("NAG_LOG_LEVEL", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def speaker() -> Iterator[MockSpeaker]:
    """Patch the CLI's speaker with a MockSpeaker."""
    mock = MockSpeaker()
    with patch("nag.__main__.create_speaker", return_value=mock):
        yield mock


@pytest.fixture
def clock() -> Iterator[MockClock]:
    """Patch the CLI's clock with a MockClock."""
    mock = MockClock(START)
    with patch("nag.__main__.SystemClock", return_value=mock):
        yield mock


class TestParseArgs:
    """Tests for argument parsing."""

    def test_message_words_collected(self) -> None:
        """Test the message may span several arguments."""
        args = parse_args(["in", "5", "tea", "is", "ready"])
        assert args.when == "in"
        assert args.target == "5"
        assert args.message == ["tea", "is", "ready"]
        assert args.estimate is False

    def test_estimate_flag_anywhere(self) -> None:
        """Test -e may appear between positionals."""
        args = parse_args(["at", "9:15", "-e", "standup"])
        assert args.estimate is True
        assert args.message == ["standup"]

    def test_long_estimate_flag(self) -> None:
        """Test --estimate."""
        assert parse_args(["--estimate", "in", "1", "x"]).estimate is True

    def test_message_required(self) -> None:
        """Test a missing message is a usage error."""
        with pytest.raises(SystemExit):
            parse_args(["in", "5"])


class TestEstimateFlow:
    """Tests for estimate-only runs."""

    def test_estimate_prints_without_waiting(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker
    ) -> None:
        """Test "in 0:05 -e" prints a target and performs no speech."""
        exit_code = main(["in", "0:05", "-e", "tea"])

        out = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert len(out) == 1
        assert TARGET_LINE.match(out[0])
        assert speaker.call_count == 0

    def test_estimate_uses_system_clock(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker
    ) -> None:
        """Test the real clock is read without sleeping."""
        with patch("nag.clock.time.sleep") as mock_sleep:
            main(["at", "3pm", "--estimate", "x"])
            mock_sleep.assert_not_called()
        assert TARGET_LINE.match(capsys.readouterr().out.strip())

    def test_mode_is_case_insensitive(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test "IN" is accepted."""
        assert main(["IN", "5", "-e", "x"]) == 0
        assert capsys.readouterr().out.strip() == "2:05pm"


class TestFullFlow:
    """Tests for runs that wait and speak."""

    def test_in_waits_and_speaks(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test a relative nag waits then speaks the joined message."""
        exit_code = main(["in", "1:30", "tea", "is", "ready"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "2:01pm"
        assert clock.sleeps == [timedelta(seconds=90)]
        assert speaker.spoken_texts == ["tea is ready"]

    def test_at_resolves_afternoon(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test "at 9" at 14:00 waits until 21:00."""
        assert main(["at", "9", "call", "home"]) == 0
        assert capsys.readouterr().out.strip() == "9:00pm"
        assert clock.sleeps == [timedelta(hours=7)]
        assert speaker.spoken_texts == ["call home"]

    def test_at_tomorrow(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test a passed am time is shown as tomorrow."""
        assert main(["at", "9am", "-e", "x"]) == 0
        assert capsys.readouterr().out.strip() == "9:00am (tomorrow)"

    def test_speech_failure_exits_nonzero(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test a speech failure is fatal."""
        speaker.set_fail(True)
        assert main(["in", "0:01", "x"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_stale_threshold_from_config(
        self,
        capsys: pytest.CaptureFixture[str],
        speaker: MockSpeaker,
        tmp_path: Path,
    ) -> None:
        """Test the configured threshold decides whether a late wakeup speaks."""
        config = tmp_path / "config.yaml"
        config.write_text("nag:\n  scheduler:\n    stale_threshold_seconds: 600\n")
        late_clock = MockClock(START, oversleep=timedelta(minutes=5))

        with patch("nag.__main__.SystemClock", return_value=late_clock):
            assert main(["--config", str(config), "in", "10", "x"]) == 0

        assert speaker.spoken_texts == ["x"]

    def test_late_wakeup_not_spoken(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker
    ) -> None:
        """Test a wakeup long after the target stays silent."""
        late_clock = MockClock(START, oversleep=timedelta(hours=1))
        with patch("nag.__main__.SystemClock", return_value=late_clock):
            assert main(["in", "10", "x"]) == 0
        assert speaker.call_count == 0


class TestErrorFlow:
    """Tests for invalid input."""

    def test_invalid_clock_time_prints_nothing(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test "at 25" fails before printing a target."""
        exit_code = main(["at", "25", "x"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Invalid hour" in captured.err
        assert clock.sleeps == []

    def test_invalid_duration(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test a malformed duration fails before printing a target."""
        assert main(["in", "1:2:3:4", "x"]) == 1
        assert capsys.readouterr().out == ""

    def test_unsupported_mode(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test a mode other than in/at is reported."""
        exit_code = main(["on", "5", "x"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Only 'in' and 'at' are supported" in captured.err

    def test_missing_config_file(
        self, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        """Test a missing --config file is reported."""
        assert main(["--config", str(tmp_path / "nope.yaml"), "in", "5", "x"]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_huge_duration_reported(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test a duration past the representable range is an input error."""
        exit_code = main(["in", "99999999999", "-e", "x"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_duration_too_large_for_timedelta(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test an hours field beyond timedelta is an input error."""
        assert main(["in", "999999999999:0:0", "x"]) == 1
        assert "Error:" in capsys.readouterr().err
        assert clock.sleeps == []

    def test_config_directory_reported(
        self, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        """Test a directory passed as --config is reported."""
        assert main(["--config", str(tmp_path), "in", "5", "x"]) == 1
        assert "Error: Cannot read config file" in capsys.readouterr().err

    def test_config_wrong_value_type_reported(
        self, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        """Test a mistyped config value is reported before anything runs."""
        config = tmp_path / "config.yaml"
        config.write_text("nag:\n  scheduler:\n    stale_threshold_seconds: abc\n")

        assert main(["--config", str(config), "in", "5", "x"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "stale_threshold_seconds" in captured.err

    def test_interrupt_during_wait(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test Ctrl+C while waiting exits with 130."""
        with patch.object(clock, "sleep", side_effect=KeyboardInterrupt):
            assert main(["in", "5", "x"]) == 130
        assert speaker.call_count == 0


class TestClockReads:
    """Tests for how the CLI consults the clock."""

    def test_target_uses_resolution_instant(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker
    ) -> None:
        """Test the clock is read once before the wait and once after it."""
        clock = MockClock(START)
        with patch("nag.__main__.SystemClock", return_value=clock):
            with patch.object(clock, "now", wraps=clock.now) as now:
                assert main(["at", "2:05pm", "x"]) == 0
                assert now.call_count == 2

        assert capsys.readouterr().out.strip() == "2:05pm"
        assert clock.sleeps == [timedelta(minutes=5)]
        assert speaker.spoken_texts == ["x"]

    def test_estimate_reads_clock_once(
        self, capsys: pytest.CaptureFixture[str], speaker: MockSpeaker, clock: MockClock
    ) -> None:
        """Test an estimate run resolves and displays from a single reading."""
        with patch.object(clock, "now", wraps=clock.now) as now:
            assert main(["at", "3pm", "-e", "x"]) == 0
            now.assert_called_once()
        assert capsys.readouterr().out.strip() == "3:00pm"
