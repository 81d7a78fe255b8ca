import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ixcipher.cipher_core import BlockCipher
from ixcipher.mode_ctr import CTRMode

KEY = bytes(range(32))


class AesBlock(BlockCipher):
    def __init__(self, key):
        self._key = key

    def block_size(self):
        return 16

    def encrypt_block(self, block):
        enc = Cipher(algorithms.AES(self._key), modes.ECB()).encryptor()
        return enc.update(block) + enc.finalize()

    def decrypt_block(self, block):
        dec = Cipher(algorithms.AES(self._key), modes.ECB()).decryptor()
        return dec.update(block) + dec.finalize()


class Identity(BlockCipher):
    def block_size(self):
        return 2

    def encrypt_block(self, block):
        return bytes(block)

    def decrypt_block(self, block):
        return bytes(block)


@pytest.mark.parametrize("nonce", [bytes(16), b"\xff" * 16, bytes(range(16))])
@pytest.mark.parametrize("length", [0, 1, 16, 40])
def test_matches_reference_aes_ctr(nonce, length):
    data = bytes(range(length))
    enc = Cipher(algorithms.AES(KEY), modes.CTR(nonce)).encryptor()
    expected = enc.update(data) + enc.finalize()
    assert CTRMode(AesBlock(KEY), nonce).process(data) == expected


def test_round_trip_and_length():
    mode = CTRMode(AesBlock(KEY), bytes(range(16)))
    data = b"stream of arbitrary length"
    encrypted = mode.process(data)
    assert len(encrypted) == len(data)
    assert mode.process(encrypted) == data


def test_counter_increments_with_carry():
    mode = CTRMode(Identity(), b"\x00\xff")
    assert mode.process(bytes(6)) == b"\x00\xff\x01\x00\x01\x01"


def test_counter_wraps_to_zero():
    mode = CTRMode(Identity(), b"\xff\xff")
    assert mode.process(bytes(4)) == b"\xff\xff\x00\x00"


def test_nonce_length_mismatch():
    with pytest.raises(ValueError, match="Nonce length"):
        CTRMode(AesBlock(KEY), bytes(8))