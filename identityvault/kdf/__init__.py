# Key Derivation Module
"""
Password-based key derivation:
- PBKDF2-HMAC-SHA1, 1000 iterations
- 48 bytes of output split into AES-256 key (32) and IV (16)
"""

from .pbkdf2 import (
    DerivedKeyMaterial,
    derive_key_material,
    PBKDF2_ITERATIONS,
    SALT_SIZE,
    KEY_SIZE,
    IV_SIZE,
)

__all__ = [
    'DerivedKeyMaterial',
    'derive_key_material',
    'PBKDF2_ITERATIONS',
    'SALT_SIZE',
    'KEY_SIZE',
    'IV_SIZE',
]
