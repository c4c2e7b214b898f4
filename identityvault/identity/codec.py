"""
Symmetric Identity Codec

Encrypts a private key at rest under a user password:
- PBKDF2 key derivation (see identityvault.kdf)
- AES-256-CBC with PKCS7 padding
- Fresh random salt per encryption

Encrypted identity format (hex, no prefix, no separator):
    [salt (16 bytes) | ciphertext]

There is no authentication tag. A wrong password is detected because the
decrypted bytes fail to unpad or fail to form a valid private key.
"""

import logging
from dataclasses import dataclass

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from ..accounts.derivation import AccountDeriver
from ..errors import IdentityMismatchError, InvalidKeyFormatError
from ..hexutil import decode_hex, encode_hex
from ..kdf.pbkdf2 import SALT_SIZE, derive_key_material

logger = logging.getLogger(__name__)


# Constants
BLOCK_SIZE = 16             # AES block size in bytes
PADDING_BITS = 128          # PKCS7 block size in bits


@dataclass
class EncryptedIdentity:
    """
    Container for an encrypted private key.

    Format: [salt | ciphertext]
    """
    salt: bytes           # 16 bytes
    ciphertext: bytes     # Multiple of 16 bytes

    def to_bytes(self) -> bytes:
        return self.salt + self.ciphertext

    @classmethod
    def from_bytes(cls, data: bytes) -> 'EncryptedIdentity':
        """
        Split raw bytes into salt and ciphertext.

        Raises:
            ValueError: If data is too short or not block aligned
        """
        ciphertext = data[SALT_SIZE:]
        if not ciphertext or len(ciphertext) % BLOCK_SIZE:
            raise ValueError("Ciphertext is not a whole number of blocks")
        return cls(salt=data[:SALT_SIZE], ciphertext=ciphertext)

    def to_hex(self) -> str:
        return encode_hex(self.to_bytes(), prefix=False)

    @classmethod
    def from_hex(cls, hex_str: str) -> 'EncryptedIdentity':
        return cls.from_bytes(decode_hex(hex_str))


def aes_cbc_encrypt(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """AES-CBC encrypt with PKCS7 padding."""
    padder = padding.PKCS7(PADDING_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv), default_backend()).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_cbc_decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """
    AES-CBC decrypt and strip PKCS7 padding.

    Raises:
        ValueError: If the padding is invalid
    """
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv), default_backend()).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(PADDING_BITS).unpadder()
    return unpadder.update(padded) + unpadder.finalize()


class IdentityCodec:
    """
    Password-based encryption of private keys.

    Example:
        codec = IdentityCodec()
        blob = codec.encrypt_identity(private_key, "P@ssw0rd")
        assert codec.decrypt_identity(blob, "P@ssw0rd") == private_key
    """

    def __init__(self, random_source=None, curve=None, deriver: AccountDeriver = None):
        """
        Args:
            random_source: Object with token_bytes(n) used for salts
            curve: Curve operations provider used to validate keys
            deriver: Pre-built AccountDeriver (overrides random_source/curve)
        """
        self._deriver = deriver or AccountDeriver(random_source, curve)
        self._random = random_source or self._deriver.random_source

    def encrypt_identity(self, private_key: str, password: str) -> str:
        """
        Encrypt a private key with a password.

        Every call uses a fresh salt, so encrypting the same key twice gives
        different results.

        Args:
            private_key: Hex private key, 0x prefix optional
            password: User password

        Returns:
            Hex encrypted identity (salt || ciphertext)

        Raises:
            InvalidKeyFormatError: If the private key is malformed
        """
        raw_key = self._deriver.parse_private_key(private_key)

        salt = self._random.token_bytes(SALT_SIZE)
        material = derive_key_material(password, salt)
        ciphertext = aes_cbc_encrypt(material.key, material.iv, raw_key)

        logger.debug("identity encrypted")
        return EncryptedIdentity(salt, ciphertext).to_hex()

    def decrypt_identity(self, encrypted_identity: str, password: str) -> str:
        """
        Recover a private key from an encrypted identity.

        Args:
            encrypted_identity: Hex output of encrypt_identity
            password: User password

        Returns:
            Private key as 0x + 64 lowercase hex chars

        Raises:
            IdentityMismatchError: If the password is wrong or the data is corrupted
        """
        try:
            identity = EncryptedIdentity.from_hex(encrypted_identity)
        except (TypeError, ValueError):
            logger.warning("identity decryption failed at step=parse")
            raise IdentityMismatchError(step="parse") from None

        material = derive_key_material(password, identity.salt)
        try:
            raw_key = aes_cbc_decrypt(material.key, material.iv, identity.ciphertext)
        except ValueError:
            logger.warning("identity decryption failed at step=unpad")
            raise IdentityMismatchError(step="unpad") from None

        private_key = encode_hex(raw_key)

        # Check that a valid account can be derived before handing the key back
        try:
            self._deriver.derive_address(private_key)
        except InvalidKeyFormatError:
            logger.warning("identity decryption failed at step=validate")
            raise IdentityMismatchError(step="validate") from None

        logger.debug("identity decrypted")
        return private_key


_default_codec = IdentityCodec()


def encrypt_identity(private_key: str, password: str) -> str:
    """Encrypt a private key under a password (fresh salt every call)."""
    return _default_codec.encrypt_identity(private_key, password)


def decrypt_identity(encrypted_identity: str, password: str) -> str:
    """Decrypt an encrypted identity; raises IdentityMismatchError on a wrong password."""
    return _default_codec.decrypt_identity(encrypted_identity, password)
