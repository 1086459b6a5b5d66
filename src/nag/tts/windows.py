"""Windows speaker using PowerShell and System.Speech."""

from .speaker import CommandSpeaker


def quote_powershell(text: str) -> str:
    """Quote text as a single-quoted PowerShell string literal."""
    return "'" + text.replace("'", "''") + "'"


def wpm_to_sapi_rate(wpm: int) -> int:
    """Map words per minute onto SpeechSynthesizer's -10..10 rate scale."""
    rate = round((wpm - 175) / 175 * 10)
    return max(-10, min(10, rate))


class PowerShellSpeaker(CommandSpeaker):
    """Speaks messages through System.Speech.Synthesis.SpeechSynthesizer."""

    BINARY = "powershell"

    def build_command(self, text: str) -> list[str]:
        statements = [
            "Add-Type -AssemblyName System.Speech",
            "$speak = New-Object System.Speech.Synthesis.SpeechSynthesizer",
        ]
        if self._voice:
            statements.append(f"$speak.SelectVoice({quote_powershell(self._voice)})")
        if self._rate:
            statements.append(f"$speak.Rate = {wpm_to_sapi_rate(self._rate)}")
        statements.append(f"$speak.Speak({quote_powershell(text)})")
        return [self.BINARY, "-NoProfile", "-Command", "; ".join(statements)]


__all__ = ["PowerShellSpeaker", "quote_powershell", "wpm_to_sapi_rate"]
