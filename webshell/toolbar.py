"""
Navigation toolbar injected into every loaded page.

The toolbar has no direct line to Python. Buttons, the address bar and the
keyboard shortcuts push messages onto ``window.__webshellQueue``; the
browser drains that queue on each poll and turns the messages into
commands. Messages are either command strings (``"back"``) or objects
such as ``{"cmd": "go", "url": "https://example.com"}``.
"""

import logging
from typing import Any, Optional

from selenium.webdriver.chrome.webdriver import WebDriver

from webshell.commands import parse_command
from webshell.types import Command, CommandKind
from webshell.utils import page_script

logger = logging.getLogger(__name__)

TOOLBAR_ID = "__webshell_toolbar"

TOOLBAR_SCRIPT = """
(function() {
    if (!Array.isArray(window.__webshellQueue)) {
        window.__webshellQueue = [];
    }
    const post = (msg) => window.__webshellQueue.push(msg);

    if (!window.__webshellKeys) {
        window.__webshellKeys = true;
        window.addEventListener('keydown', (e) => {
            if (e.key === 'BrowserBack' || (e.altKey && e.key === 'ArrowLeft')) {
                e.preventDefault();
                post('back');
            } else if (e.key === 'BrowserForward' || (e.altKey && e.key === 'ArrowRight')) {
                e.preventDefault();
                post('forward');
            }
        }, true);
    }

    if (document.getElementById('%(id)s') || !document.body) {
        return false;
    }

    const bar = document.createElement('div');
    bar.id = '%(id)s';
    bar.style.cssText = [
        'position: fixed', 'top: 0', 'left: 0', 'right: 0', 'height: 36px',
        'display: flex', 'gap: 4px', 'align-items: center', 'padding: 0 6px',
        'background: #f1f3f4', 'border-bottom: 1px solid #dadce0',
        'z-index: 2147483647', 'font: 13px sans-serif'
    ].join(';');

    const button = (label, title, msg) => {
        const b = document.createElement('button');
        b.textContent = label;
        b.title = title;
        b.dataset.cmd = msg;
        b.addEventListener('click', () => post(msg));
        return b;
    };

    const address = document.createElement('input');
    address.type = 'text';
    address.value = window.location.href;
    address.style.cssText = 'flex: 1; height: 24px; padding: 0 8px';
    address.addEventListener('keydown', (e) => {
        if (e.key === 'Enter' && address.value.trim()) {
            post({cmd: 'go', url: address.value.trim()});
        }
    });

    bar.appendChild(button('\\u2190', 'Back (Alt+Left)', 'back'));
    bar.appendChild(button('\\u2192', 'Forward (Alt+Right)', 'forward'));
    bar.appendChild(address);
    document.body.appendChild(bar);
    document.body.style.marginTop = '36px';
    return true;
})();
""" % {"id": TOOLBAR_ID}

DRAIN_SCRIPT = """
const queue = Array.isArray(window.__webshellQueue) ? window.__webshellQueue : [];
window.__webshellQueue = [];
return queue;
"""

UPDATE_SCRIPT = """
const bar = document.getElementById('%(id)s');
if (!bar) {
    return false;
}
const [location, canBack, canForward] = arguments;
bar.querySelector('button[data-cmd="back"]').disabled = !canBack;
bar.querySelector('button[data-cmd="forward"]').disabled = !canForward;
const address = bar.querySelector('input');
if (document.activeElement !== address) {
    address.value = location || '';
}
return true;
""" % {"id": TOOLBAR_ID}


def parse_ipc_message(message: Any) -> Optional[Command]:
    """Convert a toolbar message into a command."""
    if isinstance(message, str):
        return parse_command(message)

    if isinstance(message, dict):
        cmd = message.get("cmd")
        if cmd == CommandKind.GO.value:
            url = message.get("url")
            if isinstance(url, str) and url.strip():
                return Command(CommandKind.GO, url.strip())
            return None
        if isinstance(cmd, str):
            return parse_command(cmd)

    return None


@page_script
def inject_toolbar(driver: WebDriver) -> bool:
    """Add the toolbar to the current page unless it is already there."""
    if not driver:
        raise ValueError("Driver is not initialized")
    return bool(driver.execute_script(TOOLBAR_SCRIPT))


@page_script
def update_toolbar(
    driver: WebDriver,
    location: Optional[str],
    can_go_back: bool,
    can_go_forward: bool
) -> bool:
    """Reflect the history state in the toolbar buttons and address bar."""
    if not driver:
        raise ValueError("Driver is not initialized")
    return bool(driver.execute_script(UPDATE_SCRIPT, location, can_go_back, can_go_forward))


def drain_messages(driver: WebDriver) -> list[Any]:
    """Take every pending toolbar message off the page queue."""
    if not driver:
        raise ValueError("Driver is not initialized")
    messages = _drain(driver)
    return list(messages) if messages else []


@page_script
def _drain(driver: WebDriver) -> Optional[list[Any]]:
    return driver.execute_script(DRAIN_SCRIPT)


def drain_commands(driver: WebDriver) -> list[Command]:
    """Drain the page queue and parse the messages, dropping unknown ones."""
    commands = []
    for message in drain_messages(driver):
        command = parse_ipc_message(message)
        if command is None:
            logger.debug(f"Ignoring toolbar message: {message!r}")
            continue
        commands.append(command)
    return commands
