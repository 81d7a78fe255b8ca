"""Abstract interfaces shared by every cipher in the engine."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CipherCore(ABC):
    """A complete cipher method: keyed, able to encrypt, decrypt and wipe itself."""

    @abstractmethod
    def initialize(self, key: bytes, salt: bytes | None = None) -> None:
        """Key the cipher, optionally with a salt or IV."""

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt a block of data and return the ciphertext."""

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt a block of data and return the plaintext."""

    @abstractmethod
    def wipe(self) -> None:
        """Discard all key material held by the cipher."""

    @abstractmethod
    def algorithm_id(self) -> str:
        """Return the identifier of this cipher method."""

    @abstractmethod
    def trigger_lockdown(self) -> bool:
        """Enter lockdown if enabled; return whether lockdown was triggered."""


class BlockCipher(ABC):
    """A keyed permutation over fixed-size blocks."""

    @abstractmethod
    def block_size(self) -> int:
        """Return the block size in bytes."""

    @abstractmethod
    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt exactly one block."""

    @abstractmethod
    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt exactly one block."""