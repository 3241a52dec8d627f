"""
Tests for single-field transformations.
"""

import base64
import hashlib

import pytest

from hash_redactor import FieldTransformer, MissingKeyError, Operation, RedactorConfig, Symbol
from hash_redactor.transformer import compute_digest, is_empty, stringify, to_bytes


def sha256_b64(text):
    return base64.b64encode(hashlib.sha256(text.encode("utf-8")).digest()).decode("ascii")


class TestHelpers:

    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        ("", ""),
        (25, "25"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
    ])
    def test_stringify(self, value, expected):
        assert stringify(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (b"\xff\xfe", b"\xff\xfe"),
        (bytearray(b"raw"), b"raw"),
        ("Zo\u00eb", "Zo\u00eb".encode("utf-8")),
        (None, b""),
        (25, b"25"),
    ])
    def test_to_bytes(self, value, expected):
        assert to_bytes(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("", True),
        (b"", True),
        (0, False),
        ("x", False),
    ])
    def test_is_empty(self, value, expected):
        assert is_empty(value) is expected

    def test_compute_digest(self):
        assert compute_digest("george@example.com", "salt") == sha256_b64("george@example.comsalt")


class TestFieldTransformer:

    def test_keep_is_noop(self):
        working = {"a": 1}
        transformer = FieldTransformer(RedactorConfig())
        transformer.apply(working, "a", Operation.KEEP)
        transformer.commit(working)

        assert working == {"a": 1}

    def test_remove_is_deferred_until_commit(self):
        working = {"a": 1}
        transformer = FieldTransformer(RedactorConfig())
        transformer.apply(working, "a", Operation.REMOVE)

        assert "a" in working
        assert transformer.commit(working) == {"a"}
        assert working == {}

    def test_keep_wins_over_scheduled_delete(self):
        working = {"a": 1}
        transformer = FieldTransformer(RedactorConfig())
        transformer.apply(working, "a", Operation.REMOVE)
        transformer.apply(working, "a", Operation.KEEP)
        transformer.commit(working)

        assert working == {"a": 1}

    def test_digest(self):
        working = {"email": "george@example.com"}
        transformer = FieldTransformer(RedactorConfig(digest_salt="pepper"))
        transformer.apply(working, "email", Operation.DIGEST)
        transformer.commit(working)

        assert working == {"email_digest": sha256_b64("george@example.compepper")}

    def test_digest_empty_value_hashed_by_default(self):
        working = {"email": None}
        transformer = FieldTransformer(RedactorConfig())
        transformer.apply(working, "email", Operation.DIGEST)
        transformer.commit(working)

        assert working == {"email_digest": sha256_b64("")}

    @pytest.mark.parametrize("value", [None, ""])
    def test_digest_empty_passthrough(self, value):
        working = {"email": value}
        transformer = FieldTransformer(RedactorConfig(digest_empty=False))
        transformer.apply(working, "email", Operation.DIGEST)
        transformer.commit(working)

        assert working == {"email_digest": value}

    def test_digest_empty_false_still_hashes_values(self):
        working = {"email": "x"}
        transformer = FieldTransformer(RedactorConfig(digest_empty=False))
        transformer.apply(working, "email", Operation.DIGEST)

        assert working["email_digest"] == sha256_b64("x")

    def test_encrypt_stores_companions(self):
        working = {Symbol("address"): "NY"}
        transformer = FieldTransformer(RedactorConfig(encryption_key="k"))
        transformer.apply(working, Symbol("address"), Operation.ENCRYPT)
        transformer.commit(working)

        assert set(working) == {"encrypted_address", "encrypted_address_iv"}
        assert all(isinstance(key, Symbol) for key in working)
        assert len(base64.b64decode(working["encrypted_address_iv"])) == 12

    def test_encrypt_raw_bytes_when_encoding_disabled(self):
        working = {"address": "NY"}
        config = RedactorConfig(encryption_key="k", encode=False, encode_iv=False)
        FieldTransformer(config).apply(working, "address", Operation.ENCRYPT)

        assert isinstance(working["encrypted_address"], bytes)
        assert isinstance(working["encrypted_address_iv"], bytes)
        assert len(working["encrypted_address_iv"]) == 12

    def test_encrypt_uses_selected_encoding(self):
        working = {"address": "NY"}
        config = RedactorConfig(encryption_key="k", encode="hex", encode_iv="hex")
        FieldTransformer(config).apply(working, "address", Operation.ENCRYPT)

        assert len(working["encrypted_address_iv"]) == 24
        assert bytes.fromhex(working["encrypted_address"])

    def test_encrypt_without_key(self):
        working = {"address": "NY"}

        with pytest.raises(MissingKeyError):
            FieldTransformer(RedactorConfig()).apply(working, "address", Operation.ENCRYPT)
        assert working == {"address": "NY"}

    def test_digest_non_utf8_bytes(self):
        working = {"blob": b"\xff\xfe"}
        transformer = FieldTransformer(RedactorConfig(digest_salt="pepper"))
        transformer.apply(working, "blob", Operation.DIGEST)
        transformer.commit(working)

        expected = base64.b64encode(hashlib.sha256(b"\xff\xfepepper").digest()).decode("ascii")
        assert working == {"blob_digest": expected}

    def test_digest_utf8_bytes_matches_text(self):
        assert compute_digest("george".encode("utf-8"), "s") == compute_digest("george", "s")

    def test_encrypt_non_utf8_bytes(self):
        working = {"blob": b"\xff\xfe"}
        transformer = FieldTransformer(RedactorConfig(encryption_key="k"))
        transformer.apply(working, "blob", Operation.ENCRYPT)
        transformer.commit(working)

        assert set(working) == {"encrypted_blob", "encrypted_blob_iv"}
