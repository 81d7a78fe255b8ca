"""Overwriting sensitive buffers with zeros."""

from __future__ import annotations

from typing import Any


def secure_zeroize(buffer: Any) -> None:
    """Overwrite every byte of a writable buffer with zero.

    Raises ``TypeError`` for read-only or non-buffer objects.
    """
    with memoryview(buffer) as view:
        if view.readonly:
            raise TypeError("cannot zeroize a read-only buffer")
        with view.cast("B") as flat:
            flat[:] = bytes(flat.nbytes)


def zeroize_optional(value: Any) -> None:
    """Zeroize ``value`` if present and return ``None`` to replace it."""
    if value is not None:
        secure_zeroize(value)
    return None