"""
FieldTransformer - applies one operation to one field of a working record.

Deletion of original fields is deferred until commit(), so the whole pass
sees the record as it was before any plaintext field was dropped.
"""

import base64
import hashlib
import logging
from typing import Any, MutableMapping, Optional

from .cipher import AesGcmCipher
from .config import RedactorConfig
from .errors import MissingKeyError, UnknownOperationError
from .keys import data_key, digest_key, iv_key
from .operations import Operation

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "No encryption key specified. Please pass encryption_key when creating "
    "the redactor or to {call}"
)


def stringify(value: Any) -> str:
    """Text form of a field value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_bytes(value: Any) -> bytes:
    """Bytes that are hashed and encrypted for a field value. bytes values are used as-is."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return stringify(value).encode("utf-8")


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, bytes)) and len(value) == 0)


def compute_digest(value: Any, salt: str) -> str:
    """base64(SHA-256(to_bytes(value) + salt))"""
    digest = hashlib.sha256(to_bytes(value) + salt.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


class FieldTransformer:
    """
    Mutates a working copy of a record, one field at a time.

    One transformer is created per redact call and discarded with it.

    Example:
        transformer = FieldTransformer(config)
        working = dict(record)
        transformer.apply(working, "email", Operation.DIGEST)
        transformer.commit(working)
    """

    def __init__(self, config: RedactorConfig, cipher: Optional[AesGcmCipher] = None):
        self.config = config
        self.cipher = cipher or AesGcmCipher()
        self._scheduled: dict[Any, None] = {}
        self._kept: set = set()

    def apply(self, working: MutableMapping[Any, Any], key: Any, operation: Operation) -> None:
        logger.debug(f"Applying {operation.value} to field {key!r}")

        if operation == Operation.KEEP:
            self._kept.add(key)
        elif operation == Operation.REMOVE:
            self._schedule(key)
        elif operation == Operation.DIGEST:
            self.digest(working, key)
            self._schedule(key)
        elif operation == Operation.ENCRYPT:
            self.encrypt(working, key)
            self._schedule(key)
        else:
            raise UnknownOperationError(key, operation)

    def digest(self, working: MutableMapping[Any, Any], key: Any) -> None:
        value = working[key]
        if not self.config.digest_empty and is_empty(value):
            working[digest_key(key)] = value
        else:
            working[digest_key(key)] = compute_digest(value, self.config.digest_salt)

    def encrypt(self, working: MutableMapping[Any, Any], key: Any) -> None:
        crypt_key = self.config.encryption_key
        if not crypt_key:
            raise MissingKeyError(MISSING_KEY_MESSAGE.format(call="redact"))

        iv = self.cipher.generate_iv()
        encrypted_value: Any = self.cipher.encrypt(to_bytes(working[key]), crypt_key, iv)

        encoding = self.config.ciphertext_encoding
        if encoding is not None:
            encrypted_value = encoding.encode(encrypted_value)
        stored_iv: Any = iv
        iv_encoding = self.config.iv_encoding
        if iv_encoding is not None:
            stored_iv = iv_encoding.encode(iv)

        working[data_key(key)] = encrypted_value
        working[iv_key(key)] = stored_iv

    def commit(self, working: MutableMapping[Any, Any]) -> set:
        """Delete every scheduled field except those marked KEEP. Returns the deleted keys."""
        deleted = set()
        for key in self._scheduled:
            if key in self._kept or key not in working:
                continue
            del working[key]
            deleted.add(key)
        self._scheduled.clear()
        self._kept.clear()
        return deleted

    def _schedule(self, key: Any) -> None:
        self._scheduled[key] = None
