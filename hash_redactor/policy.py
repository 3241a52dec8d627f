"""
Policy resolution: which fields get which operation.
"""

from typing import Any, Mapping

from .keys import digest_key
from .operations import FilterMode, Operation


class PolicyResolver:
    """
    Expands a parsed policy against a record according to the filter mode.

    In blacklist mode only fields named by the policy are touched. In
    whitelist mode every field of the record is inspected and anything not
    explicitly kept, digested or encrypted is removed.
    """

    def resolve(
        self,
        record: Mapping[Any, Any],
        policy: Mapping[Any, Operation],
        mode: FilterMode = FilterMode.BLACKLIST,
    ) -> list[tuple[Any, Operation]]:
        """
        Return the (key, operation) pairs to apply to `record`.

        Only keys present in the record are returned; a policy entry for a
        missing field has nothing to act on. Keys are returned as the record
        holds them, so companion keys follow the record's key kind even when
        the policy spells a key differently (str vs Symbol).
        """
        if mode == FilterMode.WHITELIST:
            effective = self.whitelist_policy(policy)
            return [(key, effective.get(key, Operation.REMOVE)) for key in record]

        record_keys = {key: key for key in record}
        return [
            (record_keys[key], operation)
            for key, operation in policy.items()
            if key in record_keys
        ]

    @staticmethod
    def whitelist_policy(policy: Mapping[Any, Operation]) -> dict[Any, Operation]:
        """
        Add a KEEP entry for the digest field of every DIGEST entry.

        A record that went through redact -> decrypt still carries its digest
        fields. Redacting it again in whitelist mode would otherwise wipe them,
        since they are not named in the policy. Explicit policy entries win.
        """
        augmented = {
            digest_key(key): Operation.KEEP
            for key, operation in policy.items()
            if operation == Operation.DIGEST
        }
        augmented.update(policy)
        return augmented
