from webshell.browser import Browser, HistorySnapshot
from webshell.commands import parse_command
from webshell.config import BrowserConfig
from webshell.history import History
from webshell.types import Command, CommandKind

__all__ = [
    "Browser",
    "BrowserConfig",
    "Command",
    "CommandKind",
    "History",
    "HistorySnapshot",
    "parse_command",
]
