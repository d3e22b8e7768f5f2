from typing import Literal, Optional

from pydantic import BaseModel


class AgentAction(BaseModel):
    action: Literal["back", "forward", "go", "stop"]
    location: Optional[str]  # target for "go", ignored otherwise
    reasoning: str  # short justification, logged only

    def to_command(self) -> Optional[str]:
        """Render as command text; None means the agent wants to stop."""
        if self.action == "stop":
            return None
        if self.action == "go":
            if not self.location or not self.location.strip():
                return None
            return f"go {self.location.strip()}"
        return self.action
