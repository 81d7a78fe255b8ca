"""ChaCha20-Poly1305 cipher method."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from .cipher_core import CipherCore

_KEY_SIZE = 32
_NONCE_SIZE = 12


class ChaChaQuantum(CipherCore):
    """ChaCha20-Poly1305 with a random nonce chosen at construction."""

    def __init__(self, lockdown_enabled: bool = False) -> None:
        self._cipher: ChaCha20Poly1305 | None = None
        self._nonce = os.urandom(_NONCE_SIZE)
        self.lockdown_enabled = lockdown_enabled

    def initialize(self, key: bytes, salt: bytes | None = None) -> None:
        """Key the cipher with the first 32 bytes of ``key``; ``salt`` is unused."""
        if len(key) < _KEY_SIZE:
            raise ValueError(f"Key must be at least {_KEY_SIZE} bytes")
        self._cipher = ChaCha20Poly1305(bytes(key[:_KEY_SIZE]))

    def _require_cipher(self) -> ChaCha20Poly1305:
        if self._cipher is None:
            raise RuntimeError("Cipher not initialized")
        return self._cipher

    def encrypt(self, plaintext: bytes) -> bytes:
        """Return the ciphertext followed by its 16-byte tag."""
        return self._require_cipher().encrypt(self._nonce, bytes(plaintext), None)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Authenticate and decrypt; raise ``ValueError`` if authentication fails."""
        cipher = self._require_cipher()
        try:
            return cipher.decrypt(self._nonce, bytes(ciphertext), None)
        except InvalidTag as exc:
            raise ValueError("Decryption failed") from exc

    def wipe(self) -> None:
        self._cipher = None
        self._nonce = bytes(_NONCE_SIZE)

    def algorithm_id(self) -> str:
        return "IX-ChaChaQuantum-v1"

    def trigger_lockdown(self) -> bool:
        """Exit the process with status 1337 if lockdown is enabled."""
        if self.lockdown_enabled:
            print("[IX] Unauthorized access detected. Triggering lockdown...")
            raise SystemExit(1337)
        return False