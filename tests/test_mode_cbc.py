import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ixcipher.cipher_core import BlockCipher
from ixcipher.mode_cbc import CBCMode
from ixcipher.padding import PaddingError

KEY = bytes(range(16))
IV = bytes(range(100, 116))


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


def reference_cbc(plaintext):
    padder = padding.PKCS7(128).padder()
    padded = padder.update(plaintext) + padder.finalize()
    enc = Cipher(algorithms.AES(KEY), modes.CBC(IV)).encryptor()
    return enc.update(padded) + enc.finalize()


@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 48, 100])
def test_matches_reference_aes_cbc(length):
    plaintext = bytes(range(length))
    mode = CBCMode(AesBlock(KEY), IV)
    assert mode.encrypt(plaintext) == reference_cbc(plaintext)


@pytest.mark.parametrize("length", [0, 5, 16, 33])
def test_round_trip(length):
    plaintext = b"x" * length
    mode = CBCMode(AesBlock(KEY), IV)
    ciphertext = mode.encrypt(plaintext)
    assert len(ciphertext) % 16 == 0
    assert mode.decrypt(ciphertext) == plaintext


def test_iv_length_mismatch():
    with pytest.raises(ValueError, match="IV length mismatch"):
        CBCMode(AesBlock(KEY), b"short")


def test_unaligned_ciphertext():
    mode = CBCMode(AesBlock(KEY), IV)
    with pytest.raises(ValueError, match="not aligned"):
        mode.decrypt(b"abc")


def test_empty_ciphertext_is_padding_error():
    mode = CBCMode(AesBlock(KEY), IV)
    with pytest.raises(PaddingError):
        mode.decrypt(b"")


def test_wrong_iv_changes_first_block():
    plaintext = b"sixteen byte msg" * 2
    ciphertext = CBCMode(AesBlock(KEY), IV).encrypt(plaintext)
    recovered = CBCMode(AesBlock(KEY), bytes(16)).decrypt(ciphertext)
    assert recovered[16:] == plaintext[16:]
    assert recovered[:16] != plaintext[:16]