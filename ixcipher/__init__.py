"""Layered encryption toolkit: block cipher modes, padding, multiplexing, ChaCha20-Poly1305 and audit logging."""

__version__ = "0.1.0"