"""
Encodings Package

Registry of the binary-to-text encodings available to the encode and
encode_iv options.

Available encodings:
    - base64 (default)
    - urlsafe_base64
    - base32
    - hex

To add a new encoding:
    1. Subclass BinaryEncoding (see base_encoding.py)
    2. Call register_encoding(MyEncoding()) at import time of your code
    3. Pass encode="my_encoding" to HashRedactor or to a single call
"""

import logging
from typing import Any, Optional, Union

from ..base_encoding import BinaryEncoding
from ..errors import ConfigurationError
from .standard import (
    DEFAULT_ENCODING,
    STANDARD_ENCODINGS,
    Base32Encoding,
    Base64Encoding,
    HexEncoding,
    UrlsafeBase64Encoding,
)

logger = logging.getLogger(__name__)

_registry: dict[str, BinaryEncoding] = {enc.name: enc for enc in STANDARD_ENCODINGS}


def register_encoding(encoding: BinaryEncoding) -> None:
    """
    Make an encoding selectable by name.

    Note:
        If an encoding with the same name already exists, it will be replaced.
    """
    _registry[encoding.name] = encoding
    logger.info(f"Registered encoding: {encoding.name}")


def get_encoding(name: str) -> BinaryEncoding:
    try:
        return _registry[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown encoding '{name}' (available: {', '.join(list_encodings())})"
        ) from None


def list_encodings() -> list[str]:
    """Return the names of all registered encodings."""
    return list(_registry.keys())


def resolve_encoding(
    setting: Any, default: Union[str, BinaryEncoding, None] = None
) -> Optional[BinaryEncoding]:
    """
    Turn an encode/encode_iv option into an encoding, or None for raw bytes.

    True selects `default`, False/None disable encoding, a string names a
    registered encoding, and a BinaryEncoding instance is used as-is.
    """
    if setting is True:
        setting = DEFAULT_ENCODING if default is None else default
    if setting is False or setting is None:
        return None
    if isinstance(setting, BinaryEncoding):
        return setting
    if isinstance(setting, str):
        return get_encoding(setting)
    raise ConfigurationError(f"invalid encoding setting: {setting!r}")


__all__ = [
    "Base32Encoding",
    "Base64Encoding",
    "DEFAULT_ENCODING",
    "HexEncoding",
    "UrlsafeBase64Encoding",
    "get_encoding",
    "list_encodings",
    "register_encoding",
    "resolve_encoding",
]
