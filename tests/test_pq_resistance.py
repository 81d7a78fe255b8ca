import pytest

from ixcipher.pq_resistance import PQKEM, PostQuantumKey, encapsulate


@pytest.mark.parametrize(
    "kem, size",
    [(PQKEM.KYBER, 32), (PQKEM.BIKE, 48), (PQKEM.NTRU, 64), (PQKEM.HYBRID, 96)],
)
def test_key_sizes(kem, size):
    key = encapsulate(kem)
    assert len(key.encapsulated_key) == size
    assert len(key.shared_secret) == size


def test_keys_are_fresh():
    first = encapsulate(PQKEM.KYBER).shared_secret
    second = encapsulate(PQKEM.KYBER).shared_secret
    assert len(first) == 32
    assert len(second) == 32
    assert first != second


def test_key_and_secret_differ():
    key = encapsulate(PQKEM.NTRU)
    assert key.encapsulated_key != key.shared_secret


def test_key_is_immutable():
    key = encapsulate(PQKEM.BIKE)
    original = key.shared_secret
    with pytest.raises(AttributeError):
        key.shared_secret = b""
    assert key.shared_secret == original
    assert len(key.shared_secret) == 48


def test_post_quantum_key_fields():
    key = PostQuantumKey(b"ek", b"ss")
    assert (key.encapsulated_key, key.shared_secret) == (b"ek", b"ss")