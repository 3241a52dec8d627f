"""
Hash Redactor - MCP Server for field-level record redaction

A local MCP (Model Context Protocol) server that lets AI agents scrub
structured records before they are logged, stored or shared, and restore
encrypted fields when they are authorized to.

Tools:
    - redact_record: Remove, digest or encrypt fields of a record
    - decrypt_record: Restore encrypted fields of a redacted record
    - list_encodings: List the available ciphertext/IV encodings

Configuration (environment or .env file):
    - HASH_REDACTOR_POLICY: default policy, e.g. "email=digest,ssn=remove"
    - HASH_REDACTOR_ENCRYPTION_KEY: key for encrypt/decrypt
    - HASH_REDACTOR_DIGEST_SALT, HASH_REDACTOR_DIGEST_EMPTY
    - HASH_REDACTOR_FILTER_MODE: blacklist (default) or whitelist
    - HASH_REDACTOR_ENCODING: default encoding (base64)
"""

import dataclasses
from typing import Any, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from hash_redactor import HashRedactor, HashRedactorError, RedactorConfig
from hash_redactor.encodings import get_encoding, list_encodings as available_encodings

# Load environment variables from .env file
load_dotenv()

# Initialize MCP server
mcp = FastMCP(
    "hash-redactor",
    instructions="MCP Server for redacting and restoring fields of structured records"
)


def get_redactor() -> HashRedactor:
    """Create a redactor from the current environment configuration."""
    return HashRedactor(**dataclasses.asdict(RedactorConfig.from_env()))


def _call_options(policy: Optional[dict[str, str]], filter_mode: Optional[str] = None) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if policy:
        options["redact"] = policy
    if filter_mode:
        options["filter_mode"] = filter_mode
    return options


@mcp.tool()
def redact_record(
    record: dict[str, Any],
    policy: Optional[dict[str, str]] = None,
    filter_mode: Optional[str] = None,
) -> dict[str, Any]:
    """
    Redact fields of a record before it is logged, stored or shared.

    Args:
        record: The record to redact, a flat JSON object.
        policy: Field -> operation map. Operations: "keep", "remove",
                "digest", "encrypt". Defaults to HASH_REDACTOR_POLICY.
        filter_mode: "blacklist" (only touch fields in the policy) or
                     "whitelist" (remove every field not kept, digested or
                     encrypted). Defaults to HASH_REDACTOR_FILTER_MODE.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - record: The redacted record. Digests are stored as
                  "<field>_digest", ciphertext as "encrypted_<field>" and
                  IVs as "encrypted_<field>_iv".
        - redacted_fields: Fields of the input that are no longer present

    Example usage:
        redact_record({"email": "a@b.com", "id": 5}, {"email": "digest"})
    """
    try:
        redacted = get_redactor().redact(record, **_call_options(policy, filter_mode))
    except HashRedactorError as e:
        return {"status": "error", "message": str(e)}

    return {
        "status": "success",
        "record": redacted,
        "redacted_fields": sorted(key for key in record if key not in redacted),
    }


@mcp.tool()
def decrypt_record(
    record: dict[str, Any],
    policy: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    """
    Restore the encrypted fields of a record produced by redact_record.

    Args:
        record: A redacted record.
        policy: The policy the record was redacted with. Only "encrypt"
                entries matter. Defaults to HASH_REDACTOR_POLICY.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - record: The record with encrypted fields restored as strings
        - decrypted_fields: Fields that were restored

    Notes:
        - Digested and removed fields cannot be restored
        - Fails if a ciphertext or IV was modified
    """
    try:
        decrypted = get_redactor().decrypt(record, **_call_options(policy))
    except HashRedactorError as e:
        return {"status": "error", "message": str(e)}

    return {
        "status": "success",
        "record": decrypted,
        "decrypted_fields": sorted(key for key in decrypted if key not in record),
    }


@mcp.tool()
def list_encodings() -> dict[str, Any]:
    """
    List the encodings available for ciphertext and IVs.

    Returns:
        A dictionary containing:
        - status: "success"
        - encodings: List of {"name", "description"} entries
        - count: Number of encodings
    """
    encodings = [
        {"name": name, "description": get_encoding(name).description}
        for name in available_encodings()
    ]
    return {
        "status": "success",
        "encodings": encodings,
        "count": len(encodings),
    }


if __name__ == "__main__":
    # Run the MCP server using stdio transport
    mcp.run()
