import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from webshell.commands import parse_command

if TYPE_CHECKING:
    from webshell.browser import Browser

logger = logging.getLogger(__name__)


class BrowserAgent(ABC):
    """A source of navigation commands for a Browser."""

    browser: Optional["Browser"] = None

    @abstractmethod
    def next_command(self) -> Optional[str]:
        """Return the next command text, or None once the agent is done."""

    def bind(self, browser: "Browser") -> None:
        """Attach the browser whose state this agent may observe."""
        self.browser = browser

    def process_command(self, browser: "Browser", cmd: str) -> Optional[str]:
        """
        Parse a command and apply it to the browser directly.

        Must be called from the thread that owns the browser.

        Returns:
            The resulting location, or None if the command did nothing
        """
        command = parse_command(cmd)
        if command is None:
            logger.warning(f"Unrecognised command: {cmd!r}")
            return None
        return browser.apply(command)
