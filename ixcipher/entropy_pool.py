"""Entropy pool seeded from the operating system's random source."""

from __future__ import annotations

import hashlib
import os


class EntropyPool:
    """A buffer of OS randomness from which seeds are derived."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("Entropy pool size must not be negative")
        self._buffer = os.urandom(size)

    def derive_seed(self, output_size: int) -> bytes:
        """Return up to 64 bytes of SHA-512 over the pool."""
        if output_size < 0:
            raise ValueError("Seed size must not be negative")
        return hashlib.sha512(self._buffer).digest()[:output_size]