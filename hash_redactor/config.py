"""
Redactor configuration.

A HashRedactor holds one RedactorConfig. Each call may pass overrides,
which are merged over it for that call only; the instance config is a
frozen dataclass and never changes.
"""

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .base_encoding import BinaryEncoding
from .encodings import resolve_encoding
from .errors import ConfigurationError
from .operations import FilterMode, parse_filter_mode

EncodingSetting = Union[bool, str, BinaryEncoding, None]

ENV_PREFIX = "HASH_REDACTOR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class RedactorConfig:
    """
    Options for redact/decrypt.

    Attributes:
        redact: Policy mapping field keys to operations.
        encryption_key: Key material for encrypt/decrypt (str or bytes).
        digest_salt: Appended to every value before hashing.
        digest_empty: If False, None/empty values skip hashing and are stored as-is.
        encode: Text encoding for ciphertext (True = default_encoding, False = raw bytes).
        encode_iv: Text encoding for IVs, same values as encode.
        default_encoding: Encoding used when encode/encode_iv are True.
        filter_mode: BLACKLIST or WHITELIST.
    """

    redact: Optional[Mapping[Any, Any]] = None
    encryption_key: Optional[Union[str, bytes]] = None
    digest_salt: str = ""
    digest_empty: bool = True
    encode: EncodingSetting = True
    encode_iv: EncodingSetting = True
    default_encoding: Union[str, BinaryEncoding] = "base64"
    filter_mode: Union[FilterMode, str] = FilterMode.BLACKLIST

    def __post_init__(self):
        # normalize and validate eagerly
        object.__setattr__(self, "filter_mode", parse_filter_mode(self.filter_mode))
        for setting in (self.encode, self.encode_iv):
            resolve_encoding(setting, self.default_encoding)

    @property
    def ciphertext_encoding(self) -> Optional[BinaryEncoding]:
        return resolve_encoding(self.encode, self.default_encoding)

    @property
    def iv_encoding(self) -> Optional[BinaryEncoding]:
        return resolve_encoding(self.encode_iv, self.default_encoding)

    def require_policy(self, call: str = "redact") -> Mapping[Any, Any]:
        """The configured policy, or ConfigurationError if there is none."""
        if not self.redact:
            raise ConfigurationError(
                f"Don't know what to {call}. Please configure the redact policy "
                f"when creating the redactor or pass it as an argument to {call}."
            )
        return self.redact

    def merge(self, overrides: Mapping[str, Any]) -> "RedactorConfig":
        """Return a copy with `overrides` applied field by field."""
        if not overrides:
            return self
        unknown = set(overrides) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigurationError(f"unknown option(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RedactorConfig":
        """
        Build a config from HASH_REDACTOR_* environment variables.

        Variables:
            HASH_REDACTOR_POLICY: comma separated field=operation pairs
            HASH_REDACTOR_ENCRYPTION_KEY
            HASH_REDACTOR_DIGEST_SALT
            HASH_REDACTOR_DIGEST_EMPTY: true/false
            HASH_REDACTOR_FILTER_MODE: blacklist/whitelist
            HASH_REDACTOR_ENCODING: default encoding name
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: Optional[str] = None) -> Optional[str]:
            return env.get(ENV_PREFIX + name, default)

        options: dict[str, Any] = {}
        policy = get("POLICY")
        if policy:
            options["redact"] = parse_policy_string(policy)
        if get("ENCRYPTION_KEY"):
            options["encryption_key"] = get("ENCRYPTION_KEY")
        if get("DIGEST_SALT") is not None:
            options["digest_salt"] = get("DIGEST_SALT")
        if get("DIGEST_EMPTY") is not None:
            options["digest_empty"] = _parse_bool("DIGEST_EMPTY", get("DIGEST_EMPTY"))
        if get("FILTER_MODE"):
            options["filter_mode"] = get("FILTER_MODE")
        if get("ENCODING"):
            options["default_encoding"] = get("ENCODING")
        return cls(**options)


def parse_policy_string(text: str) -> dict[str, str]:
    """Parse "email=digest, ssn=remove" into {"email": "digest", "ssn": "remove"}."""
    policy = {}
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        field, sep, operation = entry.partition("=")
        if not sep or not field.strip():
            raise ConfigurationError(f"invalid policy entry '{entry}', expected field=operation")
        policy[field.strip()] = operation.strip()
    return policy


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{name} must be true or false, got '{value}'")
