"""
Field keys and companion key naming.

Records may use plain strings or Symbol keys. Derived keys always come back
in the same representation as the key they were derived from, so a record's
keys stay homogeneous after redaction.
"""

from typing import Any

DIGEST_SUFFIX = "_digest"
ENCRYPTED_PREFIX = "encrypted_"
IV_SUFFIX = "_iv"


class Symbol(str):
    """
    A symbol-like field key.

    Compares and hashes exactly like the equivalent str, so a dict keyed by
    Symbol("email") can be looked up with "email" and vice versa. Only the
    type differs, and key naming preserves it.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f":{str.__str__(self)}"


def _derive(key: Any, name: str) -> str:
    if not isinstance(key, str):
        raise TypeError(f"field keys must be strings, got {type(key).__name__}")
    if isinstance(key, Symbol):
        return Symbol(name)
    return name


def digest_key(key: str) -> str:
    """Key holding the salted digest of `key`."""
    return _derive(key, f"{key}{DIGEST_SUFFIX}")


def data_key(key: str) -> str:
    """Key holding the ciphertext of `key`."""
    return _derive(key, f"{ENCRYPTED_PREFIX}{key}")


def iv_key(key: str) -> str:
    """Key holding the IV used to encrypt `key`."""
    return _derive(key, f"{ENCRYPTED_PREFIX}{key}{IV_SUFFIX}")


def like(key: str, template: str) -> str:
    """Return `key` in the representation kind of `template`."""
    if isinstance(template, Symbol):
        return Symbol(key)
    return str(key)


def companion_keys(key: str) -> tuple[str, str, str]:
    """Return (digest_key, data_key, iv_key) for `key`."""
    return digest_key(key), data_key(key), iv_key(key)
