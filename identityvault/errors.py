"""
Error taxonomy for IdentityVault.

Every failure surfaced to callers is one of three typed errors, each carrying
the step that failed so callers can react without parsing messages:

- InvalidKeyFormatError: malformed or out-of-range key material
- IdentityMismatchError: wrong password or corrupted encrypted identity
- AuthenticationError: ECIES MAC check failed or the bundle is malformed

Messages never contain key material or raw cipher errors.
"""

from typing import Optional


class IdentityVaultError(Exception):
    """Base class for all IdentityVault errors."""

    default_message = "IdentityVault operation failed"

    def __init__(self, message: Optional[str] = None, step: Optional[str] = None):
        self.step = step
        super().__init__(message or self.default_message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, step={self.step!r})"


class InvalidKeyFormatError(IdentityVaultError):
    """Raised when a private or public key is malformed or out of curve range."""

    default_message = "Private key does not have correct format"


class IdentityMismatchError(IdentityVaultError):
    """Raised when an encrypted identity cannot be opened with the given password."""

    default_message = "The encrypted identity and password entered do not match"


class AuthenticationError(IdentityVaultError):
    """Raised when an encrypted message fails MAC verification."""

    default_message = "Message authentication failed"
