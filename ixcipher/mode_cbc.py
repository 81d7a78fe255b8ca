"""Cipher Block Chaining mode with PKCS#7 padding."""

from __future__ import annotations

from collections.abc import Iterator

from .cipher_core import BlockCipher
from .padding import pkcs7_pad, pkcs7_unpad


def _xor(left: bytes, right: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(left, right))


def _chunks(data: bytes, size: int) -> Iterator[bytes]:
    for start in range(0, len(data), size):
        yield data[start:start + size]


class CBCMode:
    """CBC encryption and decryption over a block cipher."""

    def __init__(self, cipher: BlockCipher, iv: bytes) -> None:
        if len(iv) != cipher.block_size():
            raise ValueError("IV length mismatch")
        self._cipher = cipher
        self._iv = bytes(iv)

    def encrypt(self, plaintext: bytes) -> bytes:
        """Pad and encrypt ``plaintext``."""
        block_size = self._cipher.block_size()
        previous = self._iv
        out = bytearray()
        for chunk in _chunks(pkcs7_pad(plaintext, block_size), block_size):
            previous = bytes(self._cipher.encrypt_block(_xor(chunk, previous)))
            out += previous
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt ``ciphertext`` and strip its padding."""
        block_size = self._cipher.block_size()
        if len(ciphertext) % block_size:
            raise ValueError("Ciphertext length not aligned")
        previous = self._iv
        out = bytearray()
        for chunk in _chunks(bytes(ciphertext), block_size):
            out += _xor(self._cipher.decrypt_block(chunk), previous)
            previous = chunk
        return pkcs7_unpad(bytes(out))