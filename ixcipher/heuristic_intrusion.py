"""Heuristic intrusion detection based on entropy behaviour."""

from __future__ import annotations

import time

_ENTROPY_JUMP = 2.0
_MIN_INTERVAL_S = 0.050


class HeuristicIntrusionDetector:
    """Flags large entropy jumps that arrive in rapid succession."""

    def __init__(self) -> None:
        self._last_entropy = 0.0
        self._last_time = time.monotonic()

    def analyze_entropy(self, current_entropy: float) -> bool:
        """Record a reading; return True if it jumped by more than 2.0 within 50 ms."""
        now = time.monotonic()
        elapsed = now - self._last_time
        jump = abs(current_entropy - self._last_entropy)
        self._last_entropy = current_entropy
        self._last_time = now
        return jump > _ENTROPY_JUMP and elapsed < _MIN_INTERVAL_S