# Identity Encryption Module
"""
Private keys encrypted at rest:
- PBKDF2 (password, salt) -> AES-256 key + IV
- AES-256-CBC, PKCS7 padding
- Format: [salt (16) | ciphertext], hex encoded
"""

from .codec import (
    EncryptedIdentity,
    IdentityCodec,
    aes_cbc_encrypt,
    aes_cbc_decrypt,
    encrypt_identity,
    decrypt_identity,
)

__all__ = [
    'EncryptedIdentity',
    'IdentityCodec',
    'aes_cbc_encrypt',
    'aes_cbc_decrypt',
    'encrypt_identity',
    'decrypt_identity',
]
