"""Linux speaker using speech-dispatcher's `spd-say`."""

from .speaker import CommandSpeaker

# spd-say takes a rate from -100 to 100 rather than words per minute
_DEFAULT_WPM = 175


def wpm_to_spd_rate(wpm: int) -> int:
    """Map words per minute onto spd-say's -100..100 rate scale.

    Args:
        wpm: Words per minute (175 is treated as normal)

    Returns:
        Rate clamped to -100..100
    """
    rate = round((wpm - _DEFAULT_WPM) / _DEFAULT_WPM * 100)
    return max(-100, min(100, rate))


class SpdSaySpeaker(CommandSpeaker):
    """Speaks messages with `spd-say`.

    Passes --wait so the call returns only after speech has finished.
    """

    BINARY = "spd-say"

    def build_command(self, text: str) -> list[str]:
        cmd = [self.BINARY, "--wait"]
        if self._voice:
            cmd += ["-t", self._voice]
        if self._rate:
            cmd += ["-r", str(wpm_to_spd_rate(self._rate))]
        cmd += ["--", text or " "]
        return cmd


__all__ = ["SpdSaySpeaker", "wpm_to_spd_rate"]
