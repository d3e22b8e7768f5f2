import sys
from typing import Optional, TextIO

from webshell.agents.base import BrowserAgent


class StdinAgent(BrowserAgent):
    """Agent that reads commands typed on standard input."""

    def __init__(
        self,
        prompt: str = "command> ",
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.prompt = prompt
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def next_command(self) -> Optional[str]:
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()
