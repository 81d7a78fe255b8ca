"""Simulated post-quantum key encapsulation."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from enum import Enum


class PQKEM(Enum):
    """Supported key encapsulation mechanisms."""

    KYBER = "Kyber"
    BIKE = "BIKE"
    NTRU = "NTRU"
    HYBRID = "Hybrid"


@dataclass(frozen=True)
class PostQuantumKey:
    """An encapsulated key and the shared secret it carries."""

    encapsulated_key: bytes
    shared_secret: bytes


_SIZES = {PQKEM.KYBER: 32, PQKEM.BIKE: 48, PQKEM.NTRU: 64}


def _random_key(size: int) -> PostQuantumKey:
    return PostQuantumKey(secrets.token_bytes(size), secrets.token_bytes(size))


def encapsulate(kem: PQKEM) -> PostQuantumKey:
    """Produce simulated key material for ``kem``.

    The hybrid mechanism concatenates a 32-byte ECC-like and a 64-byte PQ-like key.
    """
    if kem is PQKEM.HYBRID:
        ecc = _random_key(32)
        pq = _random_key(64)
        return PostQuantumKey(
            ecc.encapsulated_key + pq.encapsulated_key,
            ecc.shared_secret + pq.shared_secret,
        )
    return _random_key(_SIZES[kem])