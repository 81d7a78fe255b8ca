"""Lattice-style key encapsulation key pairs."""

from __future__ import annotations

import os
from dataclasses import dataclass

PUBLIC_KEY_SIZE = 800
SECRET_KEY_SIZE = 2400


@dataclass
class LatticeKEM:
    """A public/secret key pair sized like a Kyber key pair."""

    public_key: bytes
    secret_key: bytes

    @classmethod
    def keypair(cls) -> LatticeKEM:
        """Generate a fresh random key pair."""
        return cls(os.urandom(PUBLIC_KEY_SIZE), os.urandom(SECRET_KEY_SIZE))