"""
IdentityVault facade.

Composes account derivation, identity encryption and message encryption
around one pair of providers. Instances keep no state beyond those
providers, so one instance can be shared across threads.
"""

from .accounts.derivation import Account, AccountDeriver
from .identity.codec import IdentityCodec
from .messaging.ecies import ECIESCipher


class IdentityVault:
    """
    Example:
        vault = IdentityVault()
        account = vault.create_account()
        blob = vault.encrypt_identity(account.private_key, "P@ssw0rd")

        # Later, on another device
        private_key = vault.decrypt_identity(blob, "P@ssw0rd")
        assert vault.derive_address(private_key) == account.address
    """

    def __init__(self, random_source=None, curve=None):
        self._deriver = AccountDeriver(random_source, curve)
        self._identity = IdentityCodec(deriver=self._deriver)
        self._messages = ECIESCipher(self._deriver.random_source, self._deriver.curve)

    # Accounts

    def derive_address(self, private_key: str) -> str:
        return self._deriver.derive_address(private_key)

    def public_key_from_private_key(self, private_key: str) -> str:
        return self._deriver.public_key_from_private_key(private_key)

    def account_from_private_key(self, private_key: str) -> Account:
        return self._deriver.account_from_private_key(private_key)

    def create_account(self) -> Account:
        return self._deriver.create_account()

    def is_valid_private_key(self, private_key: str) -> bool:
        return self._deriver.is_valid_private_key(private_key)

    # Identities

    def encrypt_identity(self, private_key: str, password: str) -> str:
        return self._identity.encrypt_identity(private_key, password)

    def decrypt_identity(self, encrypted_identity: str, password: str) -> str:
        return self._identity.decrypt_identity(encrypted_identity, password)

    # Messages

    def encrypt_for_public_key(self, plaintext: str, public_key: str) -> str:
        return self._messages.encrypt_for_public_key(plaintext, public_key)

    def decrypt_with_private_key(self, encrypted: str, private_key: str) -> str:
        return self._messages.decrypt_with_private_key(encrypted, private_key)
