"""PKCS#7 padding to bring data to a multiple of the block size."""

from __future__ import annotations


class PaddingError(ValueError):
    """Raised when padded data is empty or its padding is invalid."""


def pkcs7_pad(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` with PKCS#7 to a multiple of ``block_size`` (1..255)."""
    if not 0 < block_size <= 255:
        raise ValueError("Invalid block size")
    pad_len = block_size - len(data) % block_size
    return bytes(data) + bytes([pad_len]) * pad_len


def pkcs7_unpad(padded: bytes) -> bytes:
    """Strip and validate PKCS#7 padding."""
    if not padded:
        raise PaddingError("Empty input")
    pad_len = padded[-1]
    if pad_len == 0 or pad_len > len(padded):
        raise PaddingError("Invalid padding")
    if any(byte != pad_len for byte in padded[-pad_len:]):
        raise PaddingError("Malformed padding")
    return bytes(padded[:-pad_len])