"""macOS speaker using the native `say` command."""

from .speaker import CommandSpeaker


class SaySpeaker(CommandSpeaker):
    """Speaks messages with macOS `say`."""

    BINARY = "say"

    def build_command(self, text: str) -> list[str]:
        cmd = [self.BINARY]
        if self._voice:
            cmd += ["-v", self._voice]
        if self._rate:
            cmd += ["-r", str(self._rate)]
        # Use space for empty text to avoid errors
        cmd.append(text or " ")
        return cmd


__all__ = ["SaySpeaker"]
