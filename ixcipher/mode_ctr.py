"""Counter mode: a block cipher turned into a stream cipher."""

from __future__ import annotations

from .cipher_core import BlockCipher


def _increment_counter(counter: bytes) -> bytes:
    """Add one to a big-endian counter, wrapping to zero on overflow."""
    width = len(counter)
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")


class CTRMode:
    """CTR mode keyed by a block cipher and a full-block initial counter."""

    def __init__(self, cipher: BlockCipher, nonce: bytes) -> None:
        if len(nonce) != cipher.block_size():
            raise ValueError("Nonce length must match block size")
        self._cipher = cipher
        self._nonce = bytes(nonce)

    def process(self, data: bytes) -> bytes:
        """Encrypt or decrypt ``data``; the operation is its own inverse."""
        block_size = self._cipher.block_size()
        counter = self._nonce
        out = bytearray()
        for start in range(0, len(data), block_size):
            keystream = self._cipher.encrypt_block(counter)
            out += bytes(a ^ b for a, b in zip(data[start:start + block_size], keystream))
            counter = _increment_counter(counter)
        return bytes(out)