"""Galois/Counter Mode: CTR encryption with a GHASH authentication tag."""

from __future__ import annotations

import hmac
from collections.abc import Iterator
from itertools import chain

from .cipher_core import BlockCipher
from .mode_ctr import CTRMode, _increment_counter

_BLOCK = 16
_REDUCTION = 0xE1 << 120


def _gf_mult(x: int, y: int) -> int:
    """Multiply two elements of GF(2^128) in the GCM bit order."""
    product = 0
    v = y
    for bit in range(127, -1, -1):
        if (x >> bit) & 1:
            product ^= v
        v = (v >> 1) ^ _REDUCTION if v & 1 else v >> 1
    return product


def _padded_blocks(data: bytes) -> Iterator[bytes]:
    for start in range(0, len(data), _BLOCK):
        yield data[start:start + _BLOCK].ljust(_BLOCK, b"\x00")


def _ghash(hash_key: int, aad: bytes, ciphertext: bytes) -> bytes:
    lengths = (len(aad) * 8).to_bytes(8, "big") + (len(ciphertext) * 8).to_bytes(8, "big")
    state = 0
    for block in chain(_padded_blocks(aad), _padded_blocks(ciphertext), [lengths]):
        state = _gf_mult(state ^ int.from_bytes(block, "big"), hash_key)
    return state.to_bytes(_BLOCK, "big")


class GCMMode:
    """Authenticated encryption over a 128-bit block cipher.

    ``nonce`` is the full pre-counter block J0; for a 96-bit IV this is
    ``iv + b"\\x00\\x00\\x00\\x01"``.
    """

    def __init__(self, cipher: BlockCipher, nonce: bytes, aad: bytes = b"") -> None:
        if cipher.block_size() != _BLOCK:
            raise ValueError("GCM requires a cipher with a 16-byte block")
        if len(nonce) != _BLOCK:
            raise ValueError("Nonce length must match block size")
        self._cipher = cipher
        self._j0 = bytes(nonce)
        self._ctr = CTRMode(cipher, _increment_counter(self._j0))
        self._aad = bytes(aad)
        self._hash_key = int.from_bytes(cipher.encrypt_block(bytes(_BLOCK)), "big")

    def _tag(self, ciphertext: bytes) -> bytes:
        mask = self._cipher.encrypt_block(self._j0)
        digest = _ghash(self._hash_key, self._aad, ciphertext)
        return bytes(a ^ b for a, b in zip(digest, mask))

    def encrypt_and_tag(self, plaintext: bytes) -> tuple[bytes, bytes]:
        """Encrypt ``plaintext``; return the ciphertext and its 16-byte tag."""
        ciphertext = self._ctr.process(plaintext)
        return ciphertext, self._tag(ciphertext)

    def decrypt_and_verify(self, ciphertext: bytes, tag: bytes) -> bytes | None:
        """Return the plaintext if ``tag`` authenticates, otherwise ``None``."""
        ciphertext = bytes(ciphertext)
        if not hmac.compare_digest(self._tag(ciphertext), bytes(tag)):
            return None
        return self._ctr.process(ciphertext)