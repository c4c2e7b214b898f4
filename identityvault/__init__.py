# IdentityVault
"""
Identity management for secp256k1 accounts:
- Private key -> public key -> address (identity id)
- Private keys encrypted at rest under a password (PBKDF2 + AES-256-CBC)
- Messages encrypted for a public key (ECIES)

Errors:
- InvalidKeyFormatError: malformed key
- IdentityMismatchError: wrong password for an encrypted identity
- AuthenticationError: tampered or misaddressed message
"""

import logging

from .errors import (
    IdentityVaultError,
    InvalidKeyFormatError,
    IdentityMismatchError,
    AuthenticationError,
)

from .providers import SystemRandomSource, Secp256k1Curve

from .accounts import (
    Account,
    derive_address,
    public_key_from_private_key,
    account_from_private_key,
    create_account,
    is_valid_private_key,
)

from .identity import encrypt_identity, decrypt_identity

from .messaging import encrypt_for_public_key, decrypt_with_private_key

from .facade import IdentityVault

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Errors
    'IdentityVaultError',
    'InvalidKeyFormatError',
    'IdentityMismatchError',
    'AuthenticationError',
    # Providers
    'SystemRandomSource',
    'Secp256k1Curve',
    # Accounts
    'Account',
    'derive_address',
    'public_key_from_private_key',
    'account_from_private_key',
    'create_account',
    'is_valid_private_key',
    # Identities
    'encrypt_identity',
    'decrypt_identity',
    # Messages
    'encrypt_for_public_key',
    'decrypt_with_private_key',
    # Facade
    'IdentityVault',
]
