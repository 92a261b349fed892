"""Best-effort launch of the default browser, dispatched by platform."""

import logging
import platform
import subprocess
import threading
from enum import Enum
from typing import List, Optional

logger = logging.getLogger("relay-web")


class LaunchStrategy(Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    WSL = "wsl"


def is_wsl() -> bool:
    """Return True when running under Windows Subsystem for Linux."""
    try:
        release = subprocess.run(["uname", "-r"], capture_output=True, text=True, check=True).stdout
    except (OSError, subprocess.SubprocessError):
        return False
    return "microsoft" in release.lower()


def detect_strategy(system: Optional[str] = None) -> LaunchStrategy:
    system = system or platform.system()
    if system == "Windows":
        return LaunchStrategy.WINDOWS
    if system == "Darwin":
        return LaunchStrategy.MACOS
    return LaunchStrategy.WSL if is_wsl() else LaunchStrategy.LINUX


def launch_command(strategy: LaunchStrategy, url: str) -> List[str]:
    if strategy is LaunchStrategy.WINDOWS:
        return ["cmd", "/c", "start", "", url]
    if strategy is LaunchStrategy.MACOS:
        return ["open", url]
    if strategy is LaunchStrategy.WSL:
        return ["cmd.exe", "/c", "start", "", url]
    return ["xdg-open", url]


def open_url(url: str, strategy: Optional[LaunchStrategy] = None) -> subprocess.Popen:
    """Start the browser command without waiting for it to exit."""
    strategy = strategy or detect_strategy()
    command = launch_command(strategy, url)
    logger.debug(f"Opening {url} with {strategy.value}: {command}")
    return subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def open_in_background(url: str) -> threading.Thread:
    """Fire-and-forget browser launch. Failures are logged and otherwise ignored."""
    def _run():
        try:
            open_url(url)
        except OSError as e:
            logger.warning(f"Could not open browser at {url}: {str(e)}")

    thread = threading.Thread(target=_run, name="browser-launch", daemon=True)
    thread.start()
    return thread
