import logging
from typing import Optional

from openai import AzureOpenAI

from webshell.agents.base import BrowserAgent
from webshell.agents.models import AgentAction
from webshell.config import OpenAIConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You control a web browser by issuing one navigation action at a time. "
    "Available actions: 'back', 'forward', 'go' with a full URL in 'location', "
    "or 'stop' once the goal is reached or cannot be reached."
)


class OpenAIAgent(BrowserAgent):
    """Agent that asks an Azure OpenAI model for each navigation step."""

    def __init__(
        self,
        goal: str,
        config: OpenAIConfig,
        max_steps: int = 10,
        client: Optional[AzureOpenAI] = None,
    ):
        if not goal:
            raise ValueError("Goal cannot be None or empty")
        if max_steps < 1:
            raise ValueError("max_steps must be at least 1")

        self.goal = goal
        self.config = config
        self.max_steps = max_steps
        self.steps = 0
        self.client = client or AzureOpenAI(
            api_key=config.api_key,
            api_version=config.api_version,
            azure_endpoint=config.endpoint
        )

    @classmethod
    def from_env(cls, goal: str, max_steps: int = 10) -> "OpenAIAgent":
        """Create agent using environment variables."""
        return cls(goal, OpenAIConfig.from_env(), max_steps=max_steps)

    def next_command(self) -> Optional[str]:
        if self.steps >= self.max_steps:
            logger.info(f"Agent reached its limit of {self.max_steps} steps")
            return None
        self.steps += 1

        action = self._ask()
        if action is None:
            return None
        logger.info(f"Agent chose {action.action!r}: {action.reasoning}")
        return action.to_command()

    def _describe_state(self) -> str:
        if self.browser is None:
            return "No page is open yet."
        snapshot = self.browser.snapshot
        lines = [f"Current location: {snapshot.current}", "History (oldest first):"]
        for i, entry in enumerate(snapshot.entries):
            marker = "*" if i == snapshot.index else " "
            lines.append(f"{marker} {i}: {entry}")
        return "\n".join(lines)

    def _ask(self) -> Optional[AgentAction]:
        try:
            completion = self.client.chat.completions.parse(
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": f"Goal: {self.goal}\n\n{self._describe_state()}",
                    },
                ],
                model=self.config.model,
                response_format=AgentAction,
            )
        except Exception as e:
            raise ValueError(f"Failed to get next navigation step: {str(e)}")

        message = completion.choices[0].message
        if message.refusal:
            logger.warning(message.refusal)
            return None
        return message.parsed
