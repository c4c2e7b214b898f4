"""
Account Derivation Module

Maps a secp256k1 private key to its public key and address (identity id).
The address can be shared freely; the private key should never leave the
owner's control.

Key formats:
    private key: 0x + 64 hex chars, 1 <= k < n
    public key:  0x + 128 hex chars (X || Y)
    address:     EIP-55 checksummed 0x + 40 hex chars
"""

import logging
from dataclasses import dataclass

from ..errors import InvalidKeyFormatError
from ..hexutil import decode_hex, encode_hex
from ..providers import (
    DEFAULT_CURVE,
    DEFAULT_RANDOM_SOURCE,
    PRIVATE_KEY_SIZE,
    random_private_key,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Account:
    """A private key together with what can be derived from it."""
    private_key: str
    public_key: str
    address: str

    def __repr__(self) -> str:
        return f"Account(address={self.address!r})"


def parse_private_key(private_key: str, order: int = DEFAULT_CURVE.order) -> bytes:
    """
    Decode and range-check a private key.

    Args:
        private_key: Hex string, 0x prefix optional
        order: Curve order

    Returns:
        32 raw bytes

    Raises:
        InvalidKeyFormatError: If not 32 bytes of hex or not in [1, order - 1]
    """
    try:
        raw = decode_hex(private_key)
    except (TypeError, ValueError):
        raise InvalidKeyFormatError(step="decode") from None

    if len(raw) != PRIVATE_KEY_SIZE:
        raise InvalidKeyFormatError(step="length")
    if not 0 < int.from_bytes(raw, "big") < order:
        raise InvalidKeyFormatError(step="range")
    return raw


class AccountDeriver:
    """
    Derives addresses and public keys, and creates new accounts.

    Example:
        deriver = AccountDeriver()
        account = deriver.create_account()
        assert deriver.derive_address(account.private_key) == account.address
    """

    def __init__(self, random_source=None, curve=None):
        """
        Args:
            random_source: Object with token_bytes(n); defaults to the OS CSPRNG
            curve: Curve operations provider; defaults to secp256k1
        """
        self._random = random_source or DEFAULT_RANDOM_SOURCE
        self._curve = curve or DEFAULT_CURVE

    @property
    def random_source(self):
        return self._random

    @property
    def curve(self):
        return self._curve

    def parse_private_key(self, private_key: str) -> bytes:
        return parse_private_key(private_key, self._curve.order)

    def is_valid_private_key(self, private_key: str) -> bool:
        """Check a private key without raising."""
        try:
            self.parse_private_key(private_key)
        except InvalidKeyFormatError:
            return False
        return True

    def derive_address(self, private_key: str) -> str:
        """
        Return the address for a private key.

        Raises:
            InvalidKeyFormatError: If the key is malformed or out of range
        """
        return self._curve.address(self.parse_private_key(private_key))

    def public_key_from_private_key(self, private_key: str) -> str:
        """Return the public key (0x + X || Y) for a private key."""
        point = self._curve.public_key(self.parse_private_key(private_key))
        return encode_hex(point[1:])

    def account_from_private_key(self, private_key: str) -> Account:
        """Build an Account, normalising the private key to 0x + lowercase hex."""
        raw = self.parse_private_key(private_key)
        return Account(
            private_key=encode_hex(raw),
            public_key=encode_hex(self._curve.public_key(raw)[1:]),
            address=self._curve.address(raw),
        )

    def create_account(self) -> Account:
        """Create an account from a fresh random scalar."""
        raw = random_private_key(self._random, self._curve.order)
        account = self.account_from_private_key(encode_hex(raw))
        logger.debug("account created: %s", account.address)
        return account


_default_deriver = AccountDeriver()


def derive_address(private_key: str) -> str:
    """Address (identity id) of a private key."""
    return _default_deriver.derive_address(private_key)


def public_key_from_private_key(private_key: str) -> str:
    return _default_deriver.public_key_from_private_key(private_key)


def account_from_private_key(private_key: str) -> Account:
    return _default_deriver.account_from_private_key(private_key)


def create_account() -> Account:
    """Brand new account; never returns the same private key twice in practice."""
    return _default_deriver.create_account()


def is_valid_private_key(private_key: str) -> bool:
    return _default_deriver.is_valid_private_key(private_key)
