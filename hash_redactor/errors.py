"""
Error taxonomy for the hash redactor.

Every failure aborts the current call. The working record is a private
clone, so nothing partially transformed ever reaches the caller.
"""

from typing import Any, Optional


class HashRedactorError(Exception):
    """Base class for all errors raised by hash_redactor."""


class ConfigurationError(HashRedactorError, ValueError):
    """Raised when options are missing or invalid (no policy, bad filter mode...)."""


class MissingKeyError(ConfigurationError):
    """Raised when encryption or decryption is attempted without an encryption_key."""


class UnknownOperationError(HashRedactorError, ValueError):
    """Raised when a policy maps a field to something other than keep/remove/digest/encrypt."""

    def __init__(self, key: Any, operation: Any):
        self.key = key
        self.operation = operation
        super().__init__(f"redact called with unknown operation on {key}: {operation}")


class DecryptionFailure(HashRedactorError):
    """Raised when ciphertext or IV fail authentication or cannot be decoded."""

    def __init__(self, message: str, key: Optional[Any] = None):
        self.key = key
        if key is not None:
            message = f"{message} (field: {key})"
        super().__init__(message)
