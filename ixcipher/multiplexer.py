"""Combine several cipher methods into one layered hybrid cipher."""

from __future__ import annotations

from .cipher_core import CipherCore


class CipherMultiplexer(CipherCore):
    """Encrypts through every added cipher in order and decrypts in reverse."""

    def __init__(self) -> None:
        self._ciphers: list[CipherCore] = []

    def add_cipher(self, cipher: CipherCore) -> None:
        """Append a cipher as the next encryption layer."""
        self._ciphers.append(cipher)

    def trigger_lockdown_all(self) -> bool:
        """Ask each cipher in turn to lock down; stop at the first that does."""
        return any(cipher.trigger_lockdown() for cipher in self._ciphers)

    def initialize(self, key: bytes, salt: bytes | None = None) -> None:
        """Split ``key`` into equal parts, one per cipher, and key each with its part."""
        part_len = len(key) // max(len(self._ciphers), 1)
        for index, cipher in enumerate(self._ciphers):
            start = index * part_len
            cipher.initialize(bytes(key[start:start + part_len]), salt)

    def encrypt(self, plaintext: bytes) -> bytes:
        data = bytes(plaintext)
        for cipher in self._ciphers:
            data = cipher.encrypt(data)
        return data

    def decrypt(self, ciphertext: bytes) -> bytes:
        data = bytes(ciphertext)
        for cipher in reversed(self._ciphers):
            data = cipher.decrypt(data)
        return data

    def wipe(self) -> None:
        for cipher in self._ciphers:
            cipher.wipe()

    def algorithm_id(self) -> str:
        return "IX-Multiplexer-v1"

    def trigger_lockdown(self) -> bool:
        return self.trigger_lockdown_all()