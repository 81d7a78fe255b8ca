# ixcipher

A small toolkit for layered encryption in Python.

## What it provides

- `ixcipher.cipher_core`: two abstract interfaces.
  - `CipherCore` has `initialize`, `encrypt`, `decrypt`, `wipe`,
    `algorithm_id` and `trigger_lockdown`.
  - `BlockCipher` has `block_size`, `encrypt_block` and `decrypt_block`.
- `ixcipher.padding`: `pkcs7_pad(data, block_size)` and `pkcs7_unpad(padded)`.
  - `pkcs7_pad` raises `ValueError` unless the block size is between 1 and 255.
  - `pkcs7_unpad` raises `PaddingError`, a subclass of `ValueError`, when its
    input is empty or the padding is invalid or malformed.
- Block cipher modes that work with any `BlockCipher`:
  - `mode_cbc.CBCMode(cipher, iv)`: cipher block chaining with PKCS#7 padding.
    `decrypt` raises `ValueError` on ciphertext that is not whole blocks.
  - `mode_ctr.CTRMode(cipher, nonce)`: counter mode. The nonce is a full block,
    and the counter increments big-endian. `process` both encrypts and decrypts.
  - `mode_cascade.CascadeMode(ciphers)`: runs a single block through several
    ciphers of equal block size. It encrypts in order and decrypts in reverse.
  - `mode_gcm.GCMMode(cipher, nonce, aad=b"")`: Galois/Counter Mode.
    - It needs a cipher with a 16-byte block.
    - `nonce` is the full pre-counter block J0. For a 96-bit IV that is
      `iv + b"\x00\x00\x00\x01"`.
    - `encrypt_and_tag` returns `(ciphertext, tag)` with a 16-byte GHASH tag.
    - `decrypt_and_verify` returns the plaintext, or `None` if the tag does not
      match.
- `ixcipher.multiplexer.CipherMultiplexer`: a `CipherCore` that stacks other
  `CipherCore` ciphers.
  - `initialize` splits the key into equal parts, one part per cipher.
  - Encryption runs through the ciphers in order. Decryption runs in reverse.
  - `trigger_lockdown_all` stops at the first cipher that reports a lockdown.
- `ixcipher.chacha_quantum.ChaChaQuantum(lockdown_enabled=False)`: a `CipherCore`
  backed by ChaCha20-Poly1305.
  - It keys on the first 32 bytes of the key. Shorter keys raise `ValueError`.
  - It uses a random 12-byte nonce chosen when the object is created.
  - Using it before `initialize` raises `RuntimeError`.
  - Failed authentication raises `ValueError`.
  - With `lockdown_enabled=True`, `trigger_lockdown` prints a notice and raises
    `SystemExit(1337)`.
- `ixcipher.audit_logger.AuditLogger(log_path="ix_encryption_audit.log")`: an
  append-only log and a context manager.
  - Each line holds `timestamp|event|sha256`.
  - Each hash covers the timestamp, the event and the hash on the line before,
    including lines already in the file.
- `ixcipher.entropy_pool.EntropyPool(size)`: a pool of `os.urandom` bytes.
  `derive_seed(n)` returns the first `n` bytes of the pool's SHA-512 digest,
  at most 64.
- `ixcipher.zeroization`: `secure_zeroize(buffer)` overwrites a writable buffer,
  such as a `bytearray`, with zeros.
  - It raises `TypeError` for read-only objects.
  - `zeroize_optional(value)` zeroizes the buffer if it is not `None` and
    always returns `None`.
- `ixcipher.pq_resistance`: `encapsulate(kem)` returns a `PostQuantumKey` of
  random, simulated key material.
  - Members of `PQKEM` and their sizes: `KYBER` 32 bytes, `BIKE` 48, `NTRU` 64.
  - `HYBRID` gives a 32-byte part followed by a 64-byte part.
- `ixcipher.lattice_kem.LatticeKEM.keypair()`: a random pair with an 800-byte
  `public_key` and a 2400-byte `secret_key`.
- `ixcipher.heuristic_intrusion.HeuristicIntrusionDetector`:
  `analyze_entropy(value)` returns `True` when the reading differs from the
  previous one by more than 2.0 and arrives within 50 ms of it.
- `ixcipher.hardware_lockdown.HardwareLockdown` and
  `ixcipher.self_defense.SelfDefense`: background watchdogs on daemon threads.

## Warning about the watchdogs

- `SelfDefense.monitor()` polls every two seconds. Once
  `trigger_illegal_access()` has been called, it runs the system shutdown
  command: `shutdown -h now` on Linux and macOS, `shutdown /s /t 1 /f` on
  Windows.
- `HardwareLockdown.start_monitoring()` would run
  `systemctl isolate rescue.target` on Linux, or `shutdown /s /t 0` on Windows,
  if it detected illegal access. Its detector never reports any, so
  `lockdown_triggered()` stays `False`.

Use the watchdogs only where shutting the host down is what you want.

## What it does not do

- No concrete block cipher is included. Supply your own `BlockCipher`, as in
  the example below, to use the CBC, CTR, cascade and GCM modes.
- `LatticeKEM` and `encapsulate` only produce random bytes. They perform no
  real key exchange, and `LatticeKEM` has no encapsulate or decapsulate step.
- There is no command-line tool. The package is used as a library.

## Installation

```
pip install .
```

## Example

```python
import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ixcipher.audit_logger import AuditLogger
from ixcipher.chacha_quantum import ChaChaQuantum
from ixcipher.cipher_core import BlockCipher
from ixcipher.mode_cbc import CBCMode
from ixcipher.multiplexer import CipherMultiplexer


class AESBlock(BlockCipher):
    def __init__(self, key: bytes) -> None:
        self._aes = Cipher(algorithms.AES(key), modes.ECB())

    def block_size(self) -> int:
        return 16

    def encrypt_block(self, block: bytes) -> bytes:
        return self._aes.encryptor().update(block)

    def decrypt_block(self, block: bytes) -> bytes:
        return self._aes.decryptor().update(block)


cbc = CBCMode(AESBlock(os.urandom(16)), os.urandom(16))
assert cbc.decrypt(cbc.encrypt(b"hello")) == b"hello"

mux = CipherMultiplexer()
mux.add_cipher(ChaChaQuantum())
mux.add_cipher(ChaChaQuantum())
mux.initialize(os.urandom(64), None)   # each cipher gets 32 bytes of the key
sealed = mux.encrypt(b"attack at dawn")
assert mux.decrypt(sealed) == b"attack at dawn"
print(mux.algorithm_id())              # IX-Multiplexer-v1

with AuditLogger("audit.log") as log:
    log.log_event("key rotated")
```

## Running the tests

```
pip install .[test]
pytest
```