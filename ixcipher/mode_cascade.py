"""Cascade mode: several block ciphers applied in sequence."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from .cipher_core import BlockCipher


class CascadeMode:
    """Layer block ciphers of equal block size over a single block."""

    def __init__(self, ciphers: Iterable[BlockCipher]) -> None:
        self._ciphers = list(ciphers)
        if not self._ciphers:
            raise ValueError("At least one cipher required for cascade mode")
        size = self._ciphers[0].block_size()
        if any(cipher.block_size() != size for cipher in self._ciphers):
            raise ValueError("All ciphers must have the same block size")

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt a block through every cipher in order."""
        return reduce(lambda acc, c: bytes(c.encrypt_block(acc)), self._ciphers, bytes(block))

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt a block through every cipher in reverse order."""
        return reduce(
            lambda acc, c: bytes(c.decrypt_block(acc)), reversed(self._ciphers), bytes(block)
        )