"""Background monitor that locks the system down on illegal access."""

from __future__ import annotations

import subprocess
import sys
import threading

_lockdown_lock = threading.Lock()
_lockdown_started = False


def _initiate_lockdown() -> None:
    """Isolate or shut down the system once per process."""
    global _lockdown_started
    with _lockdown_lock:
        if _lockdown_started:
            return
        _lockdown_started = True
    if sys.platform.startswith("linux"):
        command = ["systemctl", "isolate", "rescue.target"]
    elif sys.platform.startswith("win"):
        command = ["shutdown", "/s", "/t", "0"]
    else:
        return
    try:
        subprocess.run(command, capture_output=True, check=False)
    except OSError:
        pass


class HardwareLockdown:
    """Polls for illegal access at a fixed interval and locks down when it is seen."""

    def __init__(self, check_interval_ms: int) -> None:
        if check_interval_ms < 0:
            raise ValueError("Check interval must not be negative")
        self._interval_s = check_interval_ms / 1000
        self._illegal_access = threading.Event()

    @staticmethod
    def _detect_illegal_access() -> bool:
        """No detection sources are wired in; access is never reported as illegal."""
        return False

    def _watch(self) -> None:
        while not self._detect_illegal_access():
            self._illegal_access.wait(self._interval_s)
        self._illegal_access.set()
        _initiate_lockdown()

    def start_monitoring(self) -> threading.Thread:
        """Start the monitor on a daemon thread and return that thread."""
        thread = threading.Thread(target=self._watch, name="ix-lockdown", daemon=True)
        thread.start()
        return thread

    def lockdown_triggered(self) -> bool:
        """Return whether this monitor has detected illegal access."""
        return self._illegal_access.is_set()