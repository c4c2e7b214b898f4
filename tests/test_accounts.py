"""
Unit tests for account derivation.

Tests:
- Known address vectors
- Determinism
- Key format validation
- Account creation
"""

import pytest

from identityvault.accounts.derivation import (
    Account, AccountDeriver, parse_private_key,
    derive_address, public_key_from_private_key, account_from_private_key,
    create_account, is_valid_private_key
)
from identityvault.errors import InvalidKeyFormatError
from identityvault.providers import CURVE_ORDER

from tests.helpers import (
    PRIVATE_KEY_ONE, ADDRESS_ONE, PUBLIC_KEY_ONE,
    WEB3_DOC_PRIVATE_KEY, WEB3_DOC_ADDRESS,
    DeterministicRandomSource, ScriptedRandomSource
)


class TestDeriveAddress:
    """Tests for private key -> address."""

    def test_known_vectors(self):
        assert derive_address(PRIVATE_KEY_ONE) == ADDRESS_ONE
        assert derive_address(WEB3_DOC_PRIVATE_KEY) == WEB3_DOC_ADDRESS

    def test_deterministic(self):
        """Same key should always give the same address."""
        assert derive_address(WEB3_DOC_PRIVATE_KEY) == derive_address(WEB3_DOC_PRIVATE_KEY)

    def test_prefix_optional(self):
        """0x prefix and case should not matter."""
        bare = WEB3_DOC_PRIVATE_KEY[2:]
        assert derive_address(bare) == WEB3_DOC_ADDRESS
        assert derive_address("0X" + bare.upper()) == WEB3_DOC_ADDRESS

    def test_address_format(self):
        address = derive_address(WEB3_DOC_PRIVATE_KEY)
        assert address.startswith("0x")
        assert len(address) == 42

    def test_different_keys_different_addresses(self):
        assert derive_address(PRIVATE_KEY_ONE) != derive_address(WEB3_DOC_PRIVATE_KEY)


class TestKeyValidation:
    """Tests for malformed private keys."""

    @pytest.mark.parametrize("bad_key, step", [
        ("not-a-key", "decode"),
        ("123213123", "decode"),
        ("0xzz" + "00" * 31, "decode"),
        ("0x" + "00" * 31, "length"),
        ("0x" + "00" * 33, "length"),
        ("", "length"),
        ("0x" + "00" * 32, "range"),
        (hex(CURVE_ORDER), "range"),
        ("0x" + "ff" * 32, "range"),
    ])
    def test_invalid_keys_rejected(self, bad_key, step):
        with pytest.raises(InvalidKeyFormatError) as exc_info:
            derive_address(bad_key)
        assert exc_info.value.step == step

    def test_error_message(self):
        with pytest.raises(InvalidKeyFormatError, match="does not have correct format"):
            derive_address("123213123")

    def test_non_string_rejected(self):
        with pytest.raises(InvalidKeyFormatError):
            derive_address(12345)

    def test_largest_valid_scalar(self):
        """n - 1 is the largest valid private key."""
        assert is_valid_private_key(hex(CURVE_ORDER - 1))

    def test_is_valid_private_key(self):
        assert is_valid_private_key(WEB3_DOC_PRIVATE_KEY)
        assert not is_valid_private_key("not-a-key")

    def test_parse_returns_raw_bytes(self):
        assert parse_private_key(PRIVATE_KEY_ONE) == b"\x00" * 31 + b"\x01"


class TestPublicKey:
    """Tests for private key -> public key."""

    def test_generator_point(self):
        """Private key 1 maps to the curve generator."""
        assert public_key_from_private_key(PRIVATE_KEY_ONE) == PUBLIC_KEY_ONE

    def test_public_key_format(self):
        public_key = public_key_from_private_key(WEB3_DOC_PRIVATE_KEY)
        assert public_key.startswith("0x")
        assert len(public_key) == 2 + 128

    def test_invalid_key(self):
        with pytest.raises(InvalidKeyFormatError):
            public_key_from_private_key("not-a-key")


class TestAccounts:
    """Tests for account objects and creation."""

    def test_account_from_private_key(self):
        account = account_from_private_key(WEB3_DOC_PRIVATE_KEY[2:].upper())
        assert account.private_key == WEB3_DOC_PRIVATE_KEY
        assert account.address == WEB3_DOC_ADDRESS
        assert account.public_key == public_key_from_private_key(WEB3_DOC_PRIVATE_KEY)

    def test_repr_hides_private_key(self):
        account = account_from_private_key(WEB3_DOC_PRIVATE_KEY)
        assert WEB3_DOC_PRIVATE_KEY[2:] not in repr(account)

    def test_create_account_consistent(self):
        """A new account's address is the address of its private key."""
        account = create_account()
        assert isinstance(account, Account)
        assert derive_address(account.private_key) == account.address
        assert len(account.private_key) == 66

    def test_create_account_unique(self):
        """Two new accounts should never share a private key."""
        assert create_account().private_key != create_account().private_key

    def test_create_account_seeded(self, seeded_random):
        """Injected random source makes account creation reproducible."""
        a1 = AccountDeriver(random_source=seeded_random).create_account()
        a2 = AccountDeriver(random_source=DeterministicRandomSource()).create_account()
        assert a1 == a2

    def test_out_of_range_draws_are_skipped(self):
        """Zero and >= n candidates are re-drawn."""
        random_source = ScriptedRandomSource(b"\x00" * 32, b"\xff" * 32, b"\x11" * 32)
        account = AccountDeriver(random_source=random_source).create_account()
        assert account.private_key == "0x" + "11" * 32
