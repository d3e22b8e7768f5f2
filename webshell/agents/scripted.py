from pathlib import Path
from typing import Iterable, Optional, Union

from webshell.agents.base import BrowserAgent


class ScriptedAgent(BrowserAgent):
    """Agent that replays a fixed list of commands."""

    def __init__(self, commands: Iterable[str]):
        self._commands = [
            line.strip() for line in commands
            if line.strip() and not line.strip().startswith("#")
        ]
        self._position = 0

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ScriptedAgent":
        """Load commands from a text file, one per line; '#' starts a comment line."""
        with open(path, encoding="utf-8") as f:
            return cls(f.read().splitlines())

    @property
    def remaining(self) -> int:
        return len(self._commands) - self._position

    def next_command(self) -> Optional[str]:
        if self._position >= len(self._commands):
            return None
        cmd = self._commands[self._position]
        self._position += 1
        return cmd
