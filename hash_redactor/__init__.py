"""
Hash Redactor - field-level redaction for structured records

This package removes, digests or encrypts selected fields of a flat record
(a dict) before it is logged, stored or transmitted. Encrypted fields can
later be restored; digested fields can be compared across records without
revealing the plaintext.

Architecture:
    - HashRedactor: Engine exposing redact() and decrypt()
    - PolicyResolver: Expands the field policy in blacklist/whitelist mode
    - FieldTransformer: Applies keep/remove/digest/encrypt to single fields
    - AesGcmCipher: Authenticated encryption (AES-256-GCM)
    - BinaryEncoding: Abstract base class for ciphertext/IV text encodings
    - encodings/: Built-in encodings (base64, urlsafe_base64, base32, hex)

Example:
    from hash_redactor import HashRedactor

    redactor = HashRedactor(redact={"email": "digest", "address": "encrypt"},
                            encryption_key="secret")
    safe = redactor.redact({"email": "john@example.com", "address": "NY"})
    # safe: {"email_digest": "...", "encrypted_address": "...",
    #        "encrypted_address_iv": "..."}
"""

from .base_encoding import BinaryEncoding
from .cipher import AesGcmCipher
from .config import RedactorConfig
from .engine import HashRedactor
from .errors import (
    ConfigurationError,
    DecryptionFailure,
    HashRedactorError,
    MissingKeyError,
    UnknownOperationError,
)
from .keys import Symbol, data_key, digest_key, iv_key
from .operations import FilterMode, Operation
from .policy import PolicyResolver
from .transformer import FieldTransformer

__version__ = "0.1.0"

__all__ = [
    "AesGcmCipher",
    "BinaryEncoding",
    "ConfigurationError",
    "DecryptionFailure",
    "FieldTransformer",
    "FilterMode",
    "HashRedactor",
    "HashRedactorError",
    "MissingKeyError",
    "Operation",
    "PolicyResolver",
    "RedactorConfig",
    "Symbol",
    "UnknownOperationError",
    "data_key",
    "digest_key",
    "iv_key",
]
