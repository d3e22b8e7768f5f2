from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandKind(str, Enum):
    BACK = "back"
    FORWARD = "forward"
    GO = "go"


@dataclass(frozen=True)
class Command:
    """A navigation intent issued by a user, the toolbar or an agent"""

    kind: CommandKind
    location: Optional[str] = None

    def __post_init__(self):
        if self.kind is CommandKind.GO and not self.location:
            raise ValueError("go command requires a location")

    def __str__(self) -> str:
        if self.kind is CommandKind.GO:
            return f"go {self.location}"
        return self.kind.value
