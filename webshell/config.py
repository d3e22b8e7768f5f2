import os
from dataclasses import dataclass

DEFAULT_START_URL = "https://example.com"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class BrowserConfig:
    """Browser session configuration."""
    start_url: str = DEFAULT_START_URL
    headless: bool = False
    page_load_timeout: float = 10.0
    poll_interval: float = 0.25
    toolbar: bool = True

    def __post_init__(self):
        if self.page_load_timeout <= 0:
            raise ValueError("page_load_timeout must be positive")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Create configuration from environment variables."""
        return cls(
            start_url=os.environ.get("WEBSHELL_START_URL") or DEFAULT_START_URL,
            headless=_env_flag("WEBSHELL_HEADLESS", False),
            page_load_timeout=_env_float("WEBSHELL_PAGE_LOAD_TIMEOUT", 10.0),
            poll_interval=_env_float("WEBSHELL_POLL_INTERVAL", 0.25),
            toolbar=_env_flag("WEBSHELL_TOOLBAR", True),
        )


@dataclass
class OpenAIConfig:
    """Azure OpenAI configuration."""
    api_key: str
    api_version: str
    endpoint: str
    model: str = "gpt-4o"

    @classmethod
    def from_env(cls) -> "OpenAIConfig":
        """Create configuration from environment variables."""
        api_key = os.environ.get("OPENAI_API_KEY")
        api_version = os.environ.get("OPENAI_API_VERSION")
        endpoint = os.environ.get("OPENAI_API_ENDPOINT")

        if not all([api_key, api_version, endpoint]):
            raise ValueError("Azure OpenAI credentials not found in environment variables")

        return cls(
            api_key=api_key,
            api_version=api_version,
            endpoint=endpoint,
            model=os.environ.get("OPENAI_MODEL") or "gpt-4o",
        )
