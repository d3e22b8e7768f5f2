from webshell.agents.base import BrowserAgent
from webshell.agents.scripted import ScriptedAgent
from webshell.agents.stdin import StdinAgent

__all__ = ["BrowserAgent", "ScriptedAgent", "StdinAgent"]
