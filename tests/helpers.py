"""Test vectors and helpers shared across the suite."""

import hashlib


# Known secp256k1 test keys
PRIVATE_KEY_ONE = "0x" + "00" * 31 + "01"
ADDRESS_ONE = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
PUBLIC_KEY_ONE = (
    "0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)

WEB3_DOC_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
WEB3_DOC_ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"

# Encrypted identity produced by the JavaScript wallet with password "P@ssw0rd"
LEGACY_ENCRYPTED_IDENTITY = (
    "90b595e366140bb786ba5204fd5c7c7fe1302cba698492183f2c6c62149b0f90"
    "e18106f0b3014f2e7bb5d70f6210447ead622043f58b39a11480b123e8d3a3ab"
)
LEGACY_PASSWORD = "P@ssw0rd"


class DeterministicRandomSource:
    """SHA-256 counter stream; same seed gives the same bytes."""

    def __init__(self, seed: bytes = b"identityvault-tests"):
        self._seed = seed
        self._counter = 0
        self._buffer = b""

    def token_bytes(self, n: int) -> bytes:
        while len(self._buffer) < n:
            block = hashlib.sha256(self._seed + self._counter.to_bytes(8, "big")).digest()
            self._buffer += block
            self._counter += 1
        out, self._buffer = self._buffer[:n], self._buffer[n:]
        return out


class ScriptedRandomSource:
    """Returns pre-set chunks in order, then falls back to a deterministic stream."""

    def __init__(self, *chunks: bytes):
        self._chunks = list(chunks)
        self._fallback = DeterministicRandomSource()

    def token_bytes(self, n: int) -> bytes:
        if self._chunks:
            return self._chunks.pop(0)
        return self._fallback.token_bytes(n)


def flip_byte(hex_str: str, index: int) -> str:
    """Flip the low bit of one byte in a hex string."""
    data = bytearray(bytes.fromhex(hex_str))
    data[index] ^= 0x01
    return data.hex()
