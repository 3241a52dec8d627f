"""
Standard encodings - RFC 4648 and hex, backed by the stdlib codecs.

Encodings covered:
    - base64: the default, strict alphabet and no line breaks
    - urlsafe_base64: '-' and '_' instead of '+' and '/'
    - base32
    - hex
"""

import base64
import binascii

from ..base_encoding import BinaryEncoding


class Base64Encoding(BinaryEncoding):

    @property
    def name(self) -> str:
        return "base64"

    @property
    def description(self) -> str:
        return "Standard base64 (RFC 4648), no line breaks"

    def encode(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        # validate=True rejects characters outside the alphabet instead of skipping them
        return base64.b64decode(text, validate=True)


class UrlsafeBase64Encoding(BinaryEncoding):

    @property
    def name(self) -> str:
        return "urlsafe_base64"

    @property
    def description(self) -> str:
        return "URL and filename safe base64 (RFC 4648 section 5)"

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        return base64.urlsafe_b64decode(text)


class Base32Encoding(BinaryEncoding):

    @property
    def name(self) -> str:
        return "base32"

    @property
    def description(self) -> str:
        return "Base32 (RFC 4648)"

    def encode(self, data: bytes) -> str:
        return base64.b32encode(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        return base64.b32decode(text)


class HexEncoding(BinaryEncoding):

    @property
    def name(self) -> str:
        return "hex"

    @property
    def description(self) -> str:
        return "Lowercase hexadecimal"

    def encode(self, data: bytes) -> str:
        return binascii.hexlify(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        return binascii.unhexlify(text)


DEFAULT_ENCODING = Base64Encoding()

STANDARD_ENCODINGS = [
    DEFAULT_ENCODING,
    UrlsafeBase64Encoding(),
    Base32Encoding(),
    HexEncoding(),
]
