"""
Base Binary Encoding - Abstract base class for ciphertext/IV text encodings.

Ciphertext and IVs are raw bytes. Records that end up in JSON logs or
text columns need them as text, so each encrypted field is passed through
a BinaryEncoding before it is stored, and back through it on decrypt.

Extend this class to add a new encoding. For example:
    - ascii85 for denser text
    - a custom alphabet required by a downstream system

Each encoding defines:
    - name: Unique identifier used in the encode/encode_iv options
    - description: Human-readable description
    - encode(): bytes -> str
    - decode(): str -> bytes (must exactly reverse encode)
"""

from abc import ABC, abstractmethod


class BinaryEncoding(ABC):
    """
    Abstract base class for binary-to-text encodings.

    Example:
        class Ascii85Encoding(BinaryEncoding):
            @property
            def name(self) -> str:
                return "ascii85"

            @property
            def description(self) -> str:
                return "Adobe ASCII85"

            def encode(self, data: bytes) -> str:
                return base64.a85encode(data).decode("ascii")

            def decode(self, text: str) -> bytes:
                return base64.a85decode(text)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this encoding (e.g., 'base64', 'hex')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the encoding."""
        pass

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode raw bytes as text."""
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """
        Decode text produced by encode() back to raw bytes.

        Implementations raise ValueError (binascii.Error is one) on
        malformed input; callers turn that into DecryptionFailure.
        """
        pass

    def __repr__(self) -> str:
        return f"<BinaryEncoding: {self.name}>"
