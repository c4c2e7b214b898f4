# Message Encryption Module
"""
ECIES message encryption over secp256k1:
- Ephemeral ECDH key agreement
- SHA-512 key split (AES-256 key | HMAC key)
- AES-256-CBC + HMAC-SHA256 (encrypt-then-MAC)

Message format: [iv | ephemeral public key | mac | ciphertext]
"""

from .ecies import (
    EncryptedMessage,
    ECIESCipher,
    derive_ecies_keys,
    compute_mac,
    encrypt_for_public_key,
    decrypt_with_private_key,
)

__all__ = [
    'EncryptedMessage',
    'ECIESCipher',
    'derive_ecies_keys',
    'compute_mac',
    'encrypt_for_public_key',
    'decrypt_with_private_key',
]
