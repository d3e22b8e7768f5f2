"""
Parsing of free-form navigation commands.

The grammar is the one agents and the toolbar speak:

    back
    forward
    go <location>

Locations are opaque; nothing here checks that they are real URLs.
"""

from typing import Optional

from webshell.types import Command, CommandKind

GO_PREFIX = "go "


def parse_command(text: Optional[str]) -> Optional[Command]:
    """
    Turn a line of text into a navigation command.

    Args:
        text: Raw command text, surrounding whitespace is ignored

    Returns:
        Command, or None if the text is not a recognised command
    """
    if not text:
        return None

    cmd = text.strip()
    if cmd == CommandKind.BACK.value:
        return Command(CommandKind.BACK)
    if cmd == CommandKind.FORWARD.value:
        return Command(CommandKind.FORWARD)
    if cmd.startswith(GO_PREFIX):
        location = cmd[len(GO_PREFIX):].strip()
        if location:
            return Command(CommandKind.GO, location)
    return None
