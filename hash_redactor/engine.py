"""
HashRedactor - Core engine for redacting and restoring record fields.

This engine orchestrates:
1. Policy parsing and resolution (blacklist / whitelist)
2. Per-field operations: keep, remove, digest, encrypt
3. Decryption of encrypted companion fields back into plaintext

NOTE: digests are NOT suitable for protecting passwords. Every value is
hashed with the same salt so that two redacted records can be compared
for equality without revealing the original value. That makes the digest
fast to brute force. Use a password hashing scheme (bcrypt, argon2) for
credentials.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from .base_encoding import BinaryEncoding
from .cipher import AesGcmCipher
from .config import RedactorConfig
from .errors import DecryptionFailure, MissingKeyError
from .keys import data_key, iv_key, like
from .operations import Operation, parse_policy
from .policy import PolicyResolver
from .transformer import MISSING_KEY_MESSAGE, FieldTransformer

logger = logging.getLogger(__name__)


class HashRedactor:
    """
    Engine for removing, digesting or encrypting fields of a record.

    Example:
        redactor = HashRedactor(
            redact={"email": "digest", "ssn": "remove", "address": "encrypt"},
            encryption_key="my really, really, really, secret key",
        )

        safe = redactor.redact({"id": 5, "email": "george@example.com",
                                "ssn": "123-45-6789", "address": "22nd St, NY"})
        # safe: {"id": 5, "email_digest": "...", "encrypted_address": "...",
        #        "encrypted_address_iv": "..."}

        restored = redactor.decrypt(safe)
        # restored["address"] == "22nd St, NY"

        # Options can be overridden for a single call
        redactor.redact(record, redact={"email": "keep"}, filter_mode="whitelist")

    Thread Safety:
        The instance only holds a frozen config. Every call works on its own
        copy of the record, so an instance can be shared freely.
    """

    def __init__(self, cipher: Optional[AesGcmCipher] = None, **options: Any):
        """
        Initialize the HashRedactor.

        Args:
            cipher: Cipher adapter to use. Defaults to AES-256-GCM with os.urandom IVs.
            **options: Any RedactorConfig field (redact, encryption_key,
                       digest_salt, digest_empty, encode, encode_iv,
                       default_encoding, filter_mode).

        Raises:
            ConfigurationError: on unknown options, filter modes or encodings.
        """
        self._config = RedactorConfig().merge(options)
        self._cipher = cipher or AesGcmCipher()
        self._resolver = PolicyResolver()
        logger.info(
            f"HashRedactor initialized (filter_mode={self._config.filter_mode.value}, "
            f"policy_fields={len(self._config.redact or {})})"
        )

    @property
    def options(self) -> RedactorConfig:
        """The instance configuration. Per-call overrides never change it."""
        return self._config

    def redact(self, data: Mapping[Any, Any], **overrides: Any) -> dict:
        """
        Remove, digest or encrypt fields of `data` according to the policy.

        Args:
            data: The record to redact. It is never modified.
            **overrides: Options applied to this call only.

        Returns:
            A new dict with the redacted fields replaced by their companions.

        Raises:
            ConfigurationError: if no policy is configured.
            UnknownOperationError: if the policy names an unknown operation.
            MissingKeyError: if a present field must be encrypted and there is no key.
        """
        config = self._config.merge(overrides)
        policy = parse_policy(config.require_policy("redact"))

        pairs = self._resolver.resolve(data, policy, config.filter_mode)
        if not config.encryption_key and any(op == Operation.ENCRYPT for _, op in pairs):
            raise MissingKeyError(MISSING_KEY_MESSAGE.format(call="redact"))

        result = dict(data)
        transformer = FieldTransformer(config, self._cipher)
        for key, operation in pairs:
            transformer.apply(result, key, operation)
        transformer.commit(result)

        return result

    def decrypt(self, data: Mapping[Any, Any], **overrides: Any) -> dict:
        """
        Restore every encrypted field named in the policy.

        Decrypted values are strings: a number that was encrypted comes
        back as its text form. The one exception is a bytes value that is not
        UTF-8, which comes back as bytes. Digested and removed fields cannot be
        restored and are left alone.

        Raises:
            ConfigurationError: if no policy is configured.
            MissingKeyError: if no encryption_key is configured.
            DecryptionFailure: if a ciphertext or IV was tampered with or
                               does not match the key or encoding settings.
        """
        config = self._config.merge(overrides)
        policy = parse_policy(config.require_policy("decrypt"))

        if not config.encryption_key:
            raise MissingKeyError(MISSING_KEY_MESSAGE.format(call="decrypt"))

        result = dict(data)
        for key, operation in policy.items():
            if operation == Operation.ENCRYPT:
                self.decrypt_value(result, key, config)

        return result

    def decrypt_value(self, result: dict, key: Any, config: RedactorConfig) -> None:
        """
        Decrypt a single field of `result` in place, if it was encrypted.

        The restored field takes the key kind (str or Symbol) of the stored
        ciphertext field, whatever kind the policy uses.
        """
        record_keys = {k: k for k in result}
        value_key = record_keys.get(data_key(key))
        if value_key is None:
            return

        key = like(key, value_key)
        stored_iv_key = record_keys.get(iv_key(key))
        if stored_iv_key is None:
            raise DecryptionFailure(f"missing IV field {iv_key(key)}", key=key)

        iv = _decode(result[stored_iv_key], config.iv_encoding, key, "IV")
        encrypted_value = _decode(result[value_key], config.ciphertext_encoding, key, "ciphertext")

        try:
            result[key] = self._cipher.decrypt(encrypted_value, config.encryption_key, iv)
        except DecryptionFailure as e:
            raise DecryptionFailure(str(e), key=key) from e
        logger.debug(f"Decrypted field {key!r}")

        del result[value_key]
        del result[stored_iv_key]

    def redact_batch(self, records: Iterable[Mapping[Any, Any]], **overrides: Any) -> list[dict]:
        """Redact several records with the same options."""
        return [self.redact(record, **overrides) for record in records]

    def decrypt_batch(self, records: Iterable[Mapping[Any, Any]], **overrides: Any) -> list[dict]:
        """Decrypt several records with the same options."""
        return [self.decrypt(record, **overrides) for record in records]


def _decode(value: Any, encoding: Optional[BinaryEncoding], key: Any, what: str) -> bytes:
    if encoding is None:
        if not isinstance(value, (bytes, bytearray)):
            raise DecryptionFailure(f"expected raw bytes for {what}, got {type(value).__name__}", key=key)
        return bytes(value)
    if not isinstance(value, str):
        raise DecryptionFailure(f"expected {encoding.name} text for {what}, got {type(value).__name__}", key=key)
    try:
        return encoding.decode(value)
    except ValueError as e:
        raise DecryptionFailure(f"could not decode {what} as {encoding.name}: {e}", key=key) from e
