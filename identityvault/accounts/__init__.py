# Accounts Module
"""
secp256k1 account derivation:
- private key -> public key -> checksummed address
- random account creation
"""

from .derivation import (
    Account,
    AccountDeriver,
    parse_private_key,
    derive_address,
    public_key_from_private_key,
    account_from_private_key,
    create_account,
    is_valid_private_key,
)

__all__ = [
    'Account',
    'AccountDeriver',
    'parse_private_key',
    'derive_address',
    'public_key_from_private_key',
    'account_from_private_key',
    'create_account',
    'is_valid_private_key',
]
