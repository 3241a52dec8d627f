"""
Operations and filter modes, plus the parsing done at the API boundary.

Policies may name operations as enum members or as strings in any case.
Everything is normalized here so the transform code only ever sees the
closed Operation enum.
"""

from enum import Enum
from typing import Any, Mapping

from .errors import ConfigurationError, UnknownOperationError


class Operation(str, Enum):
    KEEP = "keep"
    REMOVE = "remove"
    DIGEST = "digest"
    ENCRYPT = "encrypt"


class FilterMode(str, Enum):
    """
    BLACKLIST: only fields named in the policy are touched.
    WHITELIST: every field is inspected, unlisted fields are removed.
    """

    BLACKLIST = "blacklist"
    WHITELIST = "whitelist"


def parse_operation(key: Any, value: Any) -> Operation:
    """
    Normalize a policy value for `key` into an Operation.

    None means REMOVE. Raises UnknownOperationError for anything else that
    is not an Operation or the name of one.
    """
    if value is None:
        return Operation.REMOVE
    if isinstance(value, Operation):
        return value
    if isinstance(value, str):
        try:
            return Operation(value.strip().lower())
        except ValueError:
            pass
    raise UnknownOperationError(key, value)


def parse_policy(policy: Mapping[Any, Any]) -> dict[Any, Operation]:
    """Parse every entry of a policy, failing before any field is touched."""
    return {key: parse_operation(key, value) for key, value in policy.items()}


def parse_filter_mode(value: Any) -> FilterMode:
    if isinstance(value, FilterMode):
        return value
    if isinstance(value, str):
        try:
            return FilterMode(value.strip().lower())
        except ValueError:
            pass
    raise ConfigurationError(f"unknown filter mode {value}")
