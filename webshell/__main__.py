import logging
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from piou import Cli, Option

from webshell.agents import BrowserAgent, ScriptedAgent, StdinAgent
from webshell.browser import Browser
from webshell.config import BrowserConfig

AgentName = Literal["none", "stdin", "script", "openai"]

cli = Cli(description="Minimal browser shell with back/forward history")


def make_agent(
    agent: AgentName,
    script: Optional[Path] = None,
    goal: Optional[str] = None,
) -> Optional[BrowserAgent]:
    if agent == "none":
        return None
    if agent == "stdin":
        return StdinAgent()
    if agent == "script":
        if script is None:
            raise ValueError("--script is required with --agent script")
        return ScriptedAgent.from_file(script)
    if not goal:
        raise ValueError("--goal is required with --agent openai")
    # Only import the model client when asked for
    from webshell.agents.llm import OpenAIAgent

    return OpenAIAgent.from_env(goal)


@cli.main(help="Open a browser window and navigate")
def main(
    url: Optional[str] = Option(None, "-u", "--url", help="Start-up location (default: $WEBSHELL_START_URL)"),
    agent: AgentName = Option("none", "-a", "--agent", help="Where navigation commands come from"),
    script: Optional[Path] = Option(None, "--script", help="Command file for the script agent"),
    goal: Optional[str] = Option(None, "--goal", help="Goal for the openai agent"),
    headless: bool = Option(False, "--headless", help="Hide the browser window"),
    detached: bool = Option(False, "--detached", help="Run without a window, commands only move history"),
    verbose: bool = Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """
    Commands understood by the agents:

        back | forward | go <location>

    With no agent the window stays open until it is closed. Alt+Left and
    Alt+Right or the toolbar buttons move through history.
    """
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = BrowserConfig.from_env()
    if url:
        config.start_url = url
    if headless:
        config.headless = True

    with Browser(config, detached=detached) as browser:
        browser.open()
        browser.run(make_agent(agent, script, goal))
        print(f"Final location: {browser.history.current()}")


if __name__ == "__main__":
    cli.run()
