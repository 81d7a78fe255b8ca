"""Watchdog that shuts the system down once illegal access is reported."""

from __future__ import annotations

import subprocess
import sys
import threading

_POLL_INTERVAL_S = 2.0


def _initiate_shutdown() -> None:
    if sys.platform.startswith("win"):
        command = ["shutdown", "/s", "/t", "1", "/f"]
    elif sys.platform.startswith("linux") or sys.platform == "darwin":
        command = ["shutdown", "-h", "now"]
    else:
        print("Unsupported OS for shutdown procedure", file=sys.stderr)
        return
    try:
        subprocess.Popen(command)
    except OSError:
        pass


class SelfDefense:
    """Shuts the system down after :meth:`trigger_illegal_access` is called."""

    def __init__(self) -> None:
        self._illegal = threading.Event()

    def _watch(self) -> None:
        while not self._illegal.is_set():
            self._illegal.wait(_POLL_INTERVAL_S)
        _initiate_shutdown()

    def monitor(self) -> threading.Thread:
        """Start the watchdog on a daemon thread and return that thread."""
        thread = threading.Thread(target=self._watch, name="ix-self-defense", daemon=True)
        thread.start()
        return thread

    def trigger_illegal_access(self) -> None:
        """Report illegal access to the watchdog."""
        self._illegal.set()

    def triggered(self) -> bool:
        """Return whether illegal access has been reported."""
        return self._illegal.is_set()