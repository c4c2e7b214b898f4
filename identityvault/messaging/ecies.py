"""
Asymmetric Message Codec (ECIES over secp256k1)

Encrypts short text messages for the holder of a public key:
- Ephemeral secp256k1 key pair per message
- ECDH with the recipient public key
- SHA-512(shared secret) -> encryption key (32) | MAC key (32)
- AES-256-CBC with PKCS7 padding and a random IV
- HMAC-SHA256 over iv || ephemeral public key (uncompressed) || ciphertext

Message format (hex string, fixed-width framing):
    [iv (16) | ephemeral public key, compressed (33) | mac (32) | ciphertext]

The layout matches the eccrypto / eth-crypto wallets, so messages can be
exchanged with them.

Security features:
- MAC verified in constant time BEFORE decryption
- Fresh ephemeral key and IV per message
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass

from ..accounts.derivation import parse_private_key
from ..errors import AuthenticationError, InvalidKeyFormatError
from ..hexutil import decode_hex, encode_hex
from ..identity.codec import aes_cbc_decrypt, aes_cbc_encrypt
from ..providers import (
    COMPRESSED_POINT_SIZE,
    DEFAULT_CURVE,
    DEFAULT_RANDOM_SOURCE,
    random_private_key,
)

logger = logging.getLogger(__name__)


# Constants
IV_SIZE = 16                # AES block size
MAC_SIZE = 32               # HMAC-SHA256
ENC_KEY_SIZE = 32           # AES-256
EPHEMERAL_KEY_SIZE = COMPRESSED_POINT_SIZE
MIN_CIPHERTEXT_SIZE = 16    # One padded block
HEADER_SIZE = IV_SIZE + EPHEMERAL_KEY_SIZE + MAC_SIZE   # 81 bytes


@dataclass
class EncryptedMessage:
    """
    Container for ECIES message components.

    Format: [iv | ephemeral_public_key | mac | ciphertext]
    """
    iv: bytes                     # 16 bytes
    ephemeral_public_key: bytes   # 33 bytes, compressed point
    mac: bytes                    # 32 bytes
    ciphertext: bytes             # Multiple of 16 bytes

    def to_bytes(self) -> bytes:
        return self.iv + self.ephemeral_public_key + self.mac + self.ciphertext

    @classmethod
    def from_bytes(cls, data: bytes) -> 'EncryptedMessage':
        """
        Deserialize from bytes.

        Raises:
            ValueError: If the framing is wrong
        """
        ciphertext = data[HEADER_SIZE:]
        if len(ciphertext) < MIN_CIPHERTEXT_SIZE or len(ciphertext) % MIN_CIPHERTEXT_SIZE:
            raise ValueError("Encrypted message is truncated or misaligned")

        offset = 0
        iv = data[offset:offset + IV_SIZE]
        offset += IV_SIZE

        ephemeral_public_key = data[offset:offset + EPHEMERAL_KEY_SIZE]
        offset += EPHEMERAL_KEY_SIZE

        mac = data[offset:offset + MAC_SIZE]

        return cls(iv, ephemeral_public_key, mac, ciphertext)

    def to_string(self) -> str:
        """Serialize to a hex string (no prefix)."""
        return encode_hex(self.to_bytes(), prefix=False)

    @classmethod
    def from_string(cls, encrypted: str) -> 'EncryptedMessage':
        return cls.from_bytes(decode_hex(encrypted))


def derive_ecies_keys(shared_secret: bytes):
    """
    Split SHA-512 of the ECDH secret into (encryption key, MAC key).

    Returns:
        Tuple of (enc_key, mac_key), 32 bytes each
    """
    digest = hashlib.sha512(shared_secret).digest()
    return digest[:ENC_KEY_SIZE], digest[ENC_KEY_SIZE:]


def compute_mac(mac_key: bytes, iv: bytes, ephemeral_point: bytes,
                ciphertext: bytes) -> bytes:
    """HMAC-SHA256 over iv || uncompressed ephemeral point || ciphertext."""
    return hmac.new(mac_key, iv + ephemeral_point + ciphertext, hashlib.sha256).digest()


class ECIESCipher:
    """
    Public-key encryption of text messages.

    Example:
        cipher = ECIESCipher()
        encrypted = cipher.encrypt_for_public_key("hello", bob.public_key)
        assert cipher.decrypt_with_private_key(encrypted, bob.private_key) == "hello"
    """

    def __init__(self, random_source=None, curve=None):
        """
        Args:
            random_source: Object with token_bytes(n) for ephemeral keys and IVs
            curve: Curve operations provider
        """
        self._random = random_source or DEFAULT_RANDOM_SOURCE
        self._curve = curve or DEFAULT_CURVE

    def _recipient_point(self, public_key: str) -> bytes:
        try:
            return self._curve.decode_point(decode_hex(public_key))
        except (TypeError, ValueError):
            raise InvalidKeyFormatError("Public key does not have correct format",
                                        step="public_key") from None

    def encrypt_for_public_key(self, plaintext: str, public_key: str) -> str:
        """
        Encrypt a message so only the holder of the matching private key can read it.

        Args:
            plaintext: Message text
            public_key: Recipient public key (raw, uncompressed or compressed hex)

        Returns:
            Serialized EncryptedMessage

        Raises:
            InvalidKeyFormatError: If the public key is not a curve point
        """
        if not isinstance(plaintext, str):
            raise TypeError(f"Plaintext must be str, got {type(plaintext).__name__}")
        recipient = self._recipient_point(public_key)

        # Ephemeral ECDH
        ephemeral_private = random_private_key(self._random, self._curve.order)
        ephemeral_point = self._curve.public_key(ephemeral_private)
        shared_secret = self._curve.shared_secret(ephemeral_private, recipient)
        enc_key, mac_key = derive_ecies_keys(shared_secret)

        iv = self._random.token_bytes(IV_SIZE)
        ciphertext = aes_cbc_encrypt(enc_key, iv, plaintext.encode('utf-8'))
        mac = compute_mac(mac_key, iv, ephemeral_point, ciphertext)

        message = EncryptedMessage(
            iv=iv,
            ephemeral_public_key=self._curve.compress_point(ephemeral_point),
            mac=mac,
            ciphertext=ciphertext,
        )
        logger.debug("message encrypted (%d bytes of ciphertext)", len(ciphertext))
        return message.to_string()

    def decrypt_with_private_key(self, encrypted: str, private_key: str) -> str:
        """
        Verify and decrypt a message.

        Args:
            encrypted: Output of encrypt_for_public_key
            private_key: Recipient private key

        Returns:
            The original message text

        Raises:
            InvalidKeyFormatError: If the private key is malformed
            AuthenticationError: If the message was tampered with, was
                encrypted for another key, or is malformed
        """
        raw_key = parse_private_key(private_key, self._curve.order)

        try:
            message = EncryptedMessage.from_string(encrypted)
        except (TypeError, ValueError):
            logger.warning("message decryption failed at step=parse")
            raise AuthenticationError(step="parse") from None

        try:
            ephemeral_point = self._curve.decode_point(message.ephemeral_public_key)
        except ValueError:
            logger.warning("message decryption failed at step=ephemeral_key")
            raise AuthenticationError(step="ephemeral_key") from None

        shared_secret = self._curve.shared_secret(raw_key, ephemeral_point)
        enc_key, mac_key = derive_ecies_keys(shared_secret)

        # Verify MAC first
        expected = compute_mac(mac_key, message.iv, ephemeral_point, message.ciphertext)
        if not hmac.compare_digest(expected, message.mac):
            logger.warning("message decryption failed at step=mac")
            raise AuthenticationError(step="mac")

        try:
            plaintext = aes_cbc_decrypt(enc_key, message.iv, message.ciphertext)
            return plaintext.decode('utf-8')
        except ValueError:
            # Only reachable with a valid MAC over a badly formed ciphertext
            logger.warning("message decryption failed at step=decrypt")
            raise AuthenticationError(step="decrypt") from None


_default_cipher = ECIESCipher()


def encrypt_for_public_key(plaintext: str, public_key: str) -> str:
    """Encrypt text for a recipient public key."""
    return _default_cipher.encrypt_for_public_key(plaintext, public_key)


def decrypt_with_private_key(encrypted: str, private_key: str) -> str:
    """Decrypt a message; raises AuthenticationError if the MAC does not verify."""
    return _default_cipher.decrypt_with_private_key(encrypted, private_key)
