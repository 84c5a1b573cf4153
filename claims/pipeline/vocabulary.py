from __future__ import annotations

import dataclasses
from enum import Enum

from claims.errors import ConfigurationError
from claims.model import DEFAULT_EMOTION, DEFAULT_TAG, EMOTION_VOCABULARY, TAG_VOCABULARY, ClaimRecord


class VocabularyPolicy(str, Enum):
    OPEN = "open"
    CANONICAL = "canonical"

    @classmethod
    def from_name(cls, name: str | None) -> "VocabularyPolicy":
        if not name:
            return cls.OPEN
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown vocabulary policy: {name!r}") from None


def canonical_labels(labels: tuple[str, ...], vocabulary: tuple[str, ...], default: str) -> tuple[str, ...]:
    """Keeps labels that name a vocabulary entry, in canonical casing and without repeats."""
    by_key = {entry.lower(): entry for entry in vocabulary}
    kept: list[str] = []
    for label in labels:
        entry = by_key.get(label.strip().lower())
        if entry and entry not in kept:
            kept.append(entry)
    return tuple(kept) or (default,)


def apply_policy(record: ClaimRecord, policy: VocabularyPolicy) -> ClaimRecord:
    if policy is VocabularyPolicy.OPEN:
        return record
    return dataclasses.replace(
        record,
        emotions=canonical_labels(record.emotions, EMOTION_VOCABULARY, DEFAULT_EMOTION),
        tags=canonical_labels(record.tags, TAG_VOCABULARY, DEFAULT_TAG),
    )
