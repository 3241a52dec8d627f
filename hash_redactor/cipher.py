"""
AES-256-GCM adapter around the `cryptography` package.

GCM authenticates as well as encrypts, so a tampered ciphertext, a
swapped IV or the wrong key all fail loudly on decrypt instead of
returning garbage.
"""

import hashlib
import os
from typing import Callable, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import DecryptionFailure

IV_LENGTH = 12
AES_KEY_LENGTHS = (16, 24, 32)

KeyMaterial = Union[str, bytes]


def derive_key(key: KeyMaterial) -> bytes:
    """
    Return AES key bytes for the configured key material.

    Keys that are already 16, 24 or 32 bytes long are used directly.
    Anything else (typically a passphrase) is stretched to 32 bytes with
    SHA-256.
    """
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if len(raw) in AES_KEY_LENGTHS:
        return raw
    return hashlib.sha256(raw).digest()


class AesGcmCipher:
    """
    Authenticated encryption of field values.

    Args:
        random_bytes: Secure random source, called once per generated IV.
                      Defaults to os.urandom.
    """

    def __init__(self, random_bytes: Callable[[int], bytes] = os.urandom):
        self._random_bytes = random_bytes

    def generate_iv(self) -> bytes:
        return self._random_bytes(IV_LENGTH)

    def encrypt(self, plaintext: Union[str, bytes], key: KeyMaterial, iv: bytes) -> bytes:
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8")
        return AESGCM(derive_key(key)).encrypt(iv, plaintext, None)

    def decrypt(self, ciphertext: bytes, key: KeyMaterial, iv: bytes) -> Union[str, bytes]:
        """
        Decrypt and authenticate `ciphertext`.

        Returns:
            The plaintext as str, or as bytes when it is not valid UTF-8
            (a bytes field value that was never text).

        Raises:
            DecryptionFailure: if authentication fails.
        """
        try:
            plaintext = AESGCM(derive_key(key)).decrypt(iv, ciphertext, None)
        except InvalidTag:
            raise DecryptionFailure("ciphertext failed authentication") from None
        except ValueError as e:
            # empty or oversized nonce
            raise DecryptionFailure(f"invalid IV: {e}") from e
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            return plaintext
