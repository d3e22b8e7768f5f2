import pytest
from selenium.common.exceptions import WebDriverException

from webshell import toolbar


class FakeDriver:
    """Stands in for a Chrome WebDriver: records loads and serves the toolbar queue."""

    def __init__(self, redirects=None, failing=()):
        self.redirects = redirects or {}
        self.failing = set(failing)
        self.current_url = "about:blank"
        self.loads = []
        self.messages = []
        self.toolbar_state = None
        self.window_handles = ["main"]
        self.quit_called = False

    def get(self, url):
        if url in self.failing:
            raise WebDriverException(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.loads.append(url)
        self.current_url = self.redirects.get(url, url)

    def follow_link(self, url):
        self.current_url = url

    def execute_script(self, script, *args):
        if script == toolbar.DRAIN_SCRIPT:
            messages, self.messages = self.messages, []
            return messages
        if script == toolbar.UPDATE_SCRIPT:
            self.toolbar_state = args
            return True
        if script == toolbar.TOOLBAR_SCRIPT:
            return True
        if "document.readyState" in script:
            return "complete"
        raise AssertionError(f"Unexpected script: {script[:40]!r}")

    def quit(self):
        self.quit_called = True
        self.window_handles = []


@pytest.fixture
def driver():
    return FakeDriver()
