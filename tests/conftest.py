"""
Pytest configuration and shared fixtures for Hash Redactor tests.
"""

import os
import sys

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hash_redactor import HashRedactor, Symbol  # noqa: E402

ENCRYPTION_KEY = "my really, really, really, secret key"


@pytest.fixture
def encryption_key():
    return ENCRYPTION_KEY


@pytest.fixture
def data():
    """A record keyed with symbol-like keys."""
    return {
        Symbol("id"): 5,
        Symbol("email"): "george@example.com",
        Symbol("ssn"): "George's social security number",
        Symbol("address"): "#02-03 Big Building, 22nd St, NY",
    }


@pytest.fixture
def policy():
    return {
        Symbol("email"): "digest",
        Symbol("ssn"): "remove",
        Symbol("address"): "encrypt",
    }


@pytest.fixture
def redactor(policy):
    """Return a redactor configured with the sample policy and a key."""
    return HashRedactor(redact=policy, encryption_key=ENCRYPTION_KEY)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any HASH_REDACTOR_* variables inherited from the shell or a .env file."""
    for name in list(os.environ):
        if name.startswith("HASH_REDACTOR_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def server_env(clean_env):
    """Configure the MCP server through environment variables."""
    clean_env.setenv("HASH_REDACTOR_ENCRYPTION_KEY", ENCRYPTION_KEY)
    clean_env.setenv("HASH_REDACTOR_POLICY", "email=digest,ssn=remove,address=encrypt")
    return clean_env


@pytest.fixture
def subhash():
    """Return a helper selecting the entries of a dict whose keys are in `extract`."""

    def select(hash_, *extract):
        return {key: value for key, value in hash_.items() if key in extract}

    return select
