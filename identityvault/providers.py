"""
Injectable providers for randomness and elliptic-curve operations.

Every codec takes a random source and a curve provider in its constructor,
defaulting to the process-wide CSPRNG and secp256k1. Tests pass a seeded
random source to get reproducible output.

Curve provider interface (duck-typed):
    order                                   -> int
    public_key(private: bytes)              -> 65-byte SEC1 uncompressed point
    address(private: bytes)                 -> EIP-55 checksummed address
    decode_point(data: bytes)               -> 65-byte uncompressed point
    compress_point(point: bytes)            -> 33-byte compressed point
    shared_secret(private: bytes, point)    -> 32-byte ECDH X coordinate
"""

import secrets

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.backends import default_backend
from eth_account import Account


# Constants
CURVE = ec.SECP256K1()
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
PRIVATE_KEY_SIZE = 32
RAW_PUBLIC_KEY_SIZE = 64          # X || Y
UNCOMPRESSED_POINT_SIZE = 65      # 0x04 || X || Y
COMPRESSED_POINT_SIZE = 33        # 0x02/0x03 || X


class SystemRandomSource:
    """Random source backed by the operating system CSPRNG."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class Secp256k1Curve:
    """
    secp256k1 operations.

    Point arithmetic and ECDH use the `cryptography` backend; the address
    encoding (Keccak-256 + EIP-55 checksum) comes from eth-account so that
    identities match the addresses wallets display.
    """

    order = CURVE_ORDER

    def _private_key(self, private: bytes) -> ec.EllipticCurvePrivateKey:
        return ec.derive_private_key(
            int.from_bytes(private, "big"), CURVE, default_backend()
        )

    def public_key(self, private: bytes) -> bytes:
        """Uncompressed public point for a 32-byte scalar."""
        return self._private_key(private).public_key().public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.UncompressedPoint,
        )

    def address(self, private: bytes) -> str:
        """Checksummed address for a 32-byte scalar."""
        return Account.from_key(private).address

    def _load_point(self, data: bytes) -> ec.EllipticCurvePublicKey:
        if len(data) == RAW_PUBLIC_KEY_SIZE:
            data = b"\x04" + data
        if len(data) not in (UNCOMPRESSED_POINT_SIZE, COMPRESSED_POINT_SIZE):
            raise ValueError(f"Unsupported public key length: {len(data)}")
        return ec.EllipticCurvePublicKey.from_encoded_point(CURVE, data)

    def decode_point(self, data: bytes) -> bytes:
        """
        Validate an encoded point and return its uncompressed form.

        Accepts raw X||Y (64 bytes), SEC1 uncompressed (65) or compressed (33).

        Raises:
            ValueError: If the bytes are not a point on the curve
        """
        return self._load_point(data).public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.UncompressedPoint,
        )

    def compress_point(self, point: bytes) -> bytes:
        return self._load_point(point).public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.CompressedPoint,
        )

    def shared_secret(self, private: bytes, point: bytes) -> bytes:
        """ECDH shared secret (X coordinate of private * point)."""
        return self._private_key(private).exchange(ec.ECDH(), self._load_point(point))


def random_private_key(random_source, order: int = CURVE_ORDER) -> bytes:
    """Draw 32-byte scalars until one falls in [1, order - 1]."""
    while True:
        candidate = random_source.token_bytes(PRIVATE_KEY_SIZE)
        if 0 < int.from_bytes(candidate, "big") < order:
            return candidate


DEFAULT_RANDOM_SOURCE = SystemRandomSource()
DEFAULT_CURVE = Secp256k1Curve()
