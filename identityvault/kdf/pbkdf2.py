"""
Password-based key derivation for encrypted identities.

PBKDF2 turns (password, salt) into 48 bytes:
    [key (32) | iv (16)]

The parameters (HMAC-SHA1, 1000 iterations, 48 bytes) are those of the
JavaScript wallets that produced the identities already in circulation.
Changing any of them makes those identities undecryptable.
"""

from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.backends import default_backend


# Constants
SALT_SIZE = 16              # 128-bit salt
KEY_SIZE = 32               # AES-256 key
IV_SIZE = 16                # AES block size

# PBKDF2 configuration
PBKDF2_ITERATIONS = 1000
PBKDF2_ALGORITHM = hashes.SHA1()


@dataclass(frozen=True)
class DerivedKeyMaterial:
    """Symmetric key and IV derived from a password."""
    key: bytes      # 32 bytes
    iv: bytes       # 16 bytes

    def __repr__(self) -> str:
        return "DerivedKeyMaterial(key=<redacted>, iv=<redacted>)"


def derive_key_material(password: str, salt: bytes,
                        iterations: int = PBKDF2_ITERATIONS) -> DerivedKeyMaterial:
    """
    Derive AES key and IV from a password using PBKDF2.

    Args:
        password: User password (any string, UTF-8 encoded)
        salt: 16-byte random salt
        iterations: Number of PBKDF2 iterations

    Returns:
        DerivedKeyMaterial with a 32-byte key and 16-byte IV

    Raises:
        ValueError: If salt is not 16 bytes
    """
    if len(salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes")

    kdf = PBKDF2HMAC(
        algorithm=PBKDF2_ALGORITHM,
        length=KEY_SIZE + IV_SIZE,
        salt=salt,
        iterations=iterations,
        backend=default_backend()
    )
    output = kdf.derive(password.encode('utf-8'))

    return DerivedKeyMaterial(key=output[:KEY_SIZE], iv=output[KEY_SIZE:])
