import logging
import threading
import time
from dataclasses import dataclass
from queue import Empty, Queue
from typing import TYPE_CHECKING, Optional, Union

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from webshell import toolbar
from webshell.commands import parse_command
from webshell.config import BrowserConfig
from webshell.driver import new_webdriver
from webshell.history import History
from webshell.types import Command, CommandKind

if TYPE_CHECKING:
    from webshell.agents.base import BrowserAgent

logger = logging.getLogger(__name__)

BLANK_PAGE = "about:blank"

# Marks the end of an agent's command stream on the navigation queue
_AGENT_DONE = object()


@dataclass(frozen=True)
class HistorySnapshot:
    """Read-only view of the history, safe to hand to other threads"""

    current: Optional[str]
    entries: tuple[str, ...]
    index: int

    @classmethod
    def of(cls, history: History) -> "HistorySnapshot":
        return cls(history.current(), tuple(history.entries), history.index)


class Browser:
    """
    A browsing session: one history plus the window that displays it.

    The history and the driver belong to the thread that calls ``poll`` or
    ``run``. Other threads (agents) hand navigation commands over through
    ``send``, which only touches the navigation queue.
    """

    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        driver: Optional[WebDriver] = None,
        detached: bool = False,
    ) -> None:
        """
        Initialize the Browser instance.

        Args:
            config: Session configuration, defaults to BrowserConfig()
            driver: Existing WebDriver to use as the content layer
            detached: Run without any content layer, commands only move history
        """
        self.config: BrowserConfig = config or BrowserConfig()
        self.history: History = History(self.config.start_url)
        self.detached: bool = detached
        self.driver: Optional[WebDriver] = driver
        self._queue: Queue = Queue()
        self._snapshot: HistorySnapshot = HistorySnapshot.of(self.history)

        if self.driver is None and not self.detached:
            self._setup_driver()

    def __enter__(self):
        """Support for context manager protocol."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Ensure browser is closed when exiting context."""
        self.close()

    @property
    def snapshot(self) -> HistorySnapshot:
        """History state as of the last completed operation."""
        return self._snapshot

    def close(self) -> None:
        """Close the browser window and clean up resources."""
        if self.driver:
            try:
                self.driver.quit()
            except WebDriverException as e:
                logger.warning(f"Failed to quit driver cleanly: {e.msg or e}")
            self.driver = None

    def open(self) -> bool:
        """
        Show the initial history location.

        Returns:
            bool: True if the page was loaded
        """
        location = self.history.current() or BLANK_PAGE
        logger.info(f"Opening {location}")
        if not self.driver:
            return True
        return self._load(location, seed=len(self.history) == 1)

    def navigate_to(self, location: str) -> bool:
        """
        Navigate to a location and record it in history.

        Args:
            location: Location to visit, not validated

        Returns:
            bool: True if navigation was successful, False otherwise
        """
        logger.info(f"Navigating to {location}")
        if not self.driver:
            self.history.push(location)
            self._publish()
            return True
        return self._load(location)

    def go_back(self) -> Optional[str]:
        """
        Navigate back in history.

        Returns:
            The location now shown, or None if there is no earlier entry
        """
        location = self.history.back()
        if location is None:
            logger.debug("Already at the start of history")
            return None
        logger.info(f"Going back to {location}")
        self._show(location)
        return location

    def go_forward(self) -> Optional[str]:
        """
        Navigate forward in history.

        Returns:
            The location now shown, or None if there is no later entry
        """
        location = self.history.forward()
        if location is None:
            logger.debug("Already at the end of history")
            return None
        logger.info(f"Going forward to {location}")
        self._show(location)
        return location

    def apply(self, command: Command) -> Optional[str]:
        """
        Carry out a navigation command.

        Returns:
            The current location afterwards, or None if nothing changed
        """
        if command.kind is CommandKind.BACK:
            return self.go_back()
        if command.kind is CommandKind.FORWARD:
            return self.go_forward()
        if self.navigate_to(command.location):
            return self.history.current()
        return None

    def send(self, command: Union[Command, str]) -> bool:
        """
        Queue a command for the owning thread. Safe to call from any thread.

        Returns:
            bool: False if the text was not a recognised command
        """
        if isinstance(command, str):
            parsed = parse_command(command)
            if parsed is None:
                logger.warning(f"Unrecognised command: {command!r}")
                return False
            command = parsed
        self._queue.put(command)
        return True

    def sync_location(self) -> Optional[str]:
        """
        Record a navigation that completed inside the page.

        Link clicks, form posts and redirects change the driver's URL without
        going through navigate_to; a URL other than the current history
        entry is pushed.
        """
        if not self.driver:
            return None
        try:
            url = self.driver.current_url
        except WebDriverException as e:
            logger.debug(f"Could not read current URL: {e.msg or e}")
            return None
        return self._record(url)

    def poll(self) -> bool:
        """
        Run one tick of the event loop.

        Returns:
            bool: False once the queued agent has finished
        """
        running = True
        if self.driver and self.config.toolbar:
            for command in toolbar.drain_commands(self.driver):
                self.apply(command)

        while True:
            try:
                item = self._queue.get_nowait()
            except Empty:
                break
            try:
                if item is _AGENT_DONE:
                    running = False
                else:
                    self.apply(item)
            finally:
                self._queue.task_done()

        self.sync_location()
        if self.driver and self.config.toolbar:
            toolbar.inject_toolbar(self.driver)
            toolbar.update_toolbar(
                self.driver,
                self.history.current(),
                self.history.can_go_back(),
                self.history.can_go_forward(),
            )
        return running

    def run(self, agent: Optional["BrowserAgent"] = None) -> None:
        """
        Drive the session until the agent runs out of commands.

        The loop also ends when the window is closed or the process is
        interrupted; without an agent only those end it.
        """
        if agent is None and not self.driver:
            logger.info("Nothing to run without a window or an agent")
            return

        if agent is not None:
            agent.bind(self)
            worker = threading.Thread(
                target=self._feed, args=(agent,), name="webshell-agent", daemon=True
            )
            worker.start()

        try:
            while self.poll():
                if self.driver and not self._window_open():
                    logger.info("Window closed")
                    break
                time.sleep(self.config.poll_interval)
        except KeyboardInterrupt:
            logger.info("Interrupted")

    def _feed(self, agent: "BrowserAgent") -> None:
        """Agent thread: queue each command and wait until it has been applied."""
        try:
            for text in iter(agent.next_command, None):
                if self.send(text):
                    self._queue.join()
        except Exception as e:
            logger.error(f"Agent {type(agent).__name__} failed: {str(e)}")
        finally:
            self._queue.put(_AGENT_DONE)

    def _load(self, location: str, seed: bool = False) -> bool:
        try:
            self.driver.get(location)
            self._wait_for_page_load()
        except WebDriverException as e:
            logger.error(f"Navigation to {location} failed: {e.msg or e}")
            return False
        try:
            url = self.driver.current_url
        except WebDriverException:
            url = None
        if seed and url:
            # The start location becomes whatever the engine settled on
            self.history.replace_current(url)
            self._publish()
        else:
            self._record(url or location)
        if self.config.toolbar:
            toolbar.inject_toolbar(self.driver)
        return True

    def _record(self, url: Optional[str]) -> Optional[str]:
        """Push a finished page load unless it is already the current entry."""
        if not url or url == self.history.current():
            return None
        self.history.push(url)
        self._publish()
        logger.debug(f"Page loaded: {url}")
        return url

    def _show(self, location: str) -> None:
        if self.driver:
            self._load(location)
        self._publish()

    def _publish(self) -> None:
        self._snapshot = HistorySnapshot.of(self.history)

    def _setup_driver(self):
        """Initialize the web driver."""
        self.driver = new_webdriver(self.config.headless, self.config.page_load_timeout)

    def _wait_for_page_load(self):
        """Wait for the page to fully load."""
        WebDriverWait(self.driver, self.config.page_load_timeout).until(
            lambda d: d.execute_script("return document.readyState") == "complete"
        )

    def _window_open(self) -> bool:
        try:
            return bool(self.driver.window_handles)
        except WebDriverException:
            return False
