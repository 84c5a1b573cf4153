"""Lexical signal extraction for claim narratives.

Every function here is pure and synchronous: keyword containment on the
lower-cased text for emotions, tags and severity, and ordered pattern
search on the original text for the time and location hints so the
returned substring keeps the claimant's casing.
"""

from __future__ import annotations

import re

from claims.model import (
    DEFAULT_EMOTION,
    DEFAULT_TAG,
    LOCATION_NOT_SPECIFIED,
    TIME_NOT_SPECIFIED,
    ClaimSignals,
    Severity,
)

# ── Keyword groups (order matters: labels are emitted in this order) ──
EMOTION_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Physical Distress", ("pain", "hurt", "injured")),
    ("Anxiety", ("scared", "worried", "anxious")),
    ("Frustration", ("angry", "frustrated")),
)

TAG_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Accident", ("accident", "fell", "crash")),
    ("Medical", ("medical", "injury", "hospital")),
    ("Property Damage", ("property", "damage", "broken")),
    ("Theft", ("theft", "stolen", "robbery")),
)

HIGH_SEVERITY_WORDS: tuple[str, ...] = ("serious", "severe", "emergency")
MEDIUM_SEVERITY_WORDS: tuple[str, ...] = ("pain", "damage", "injury")

# ── Time / location patterns ─────────────────────────────────────────
# Time: one alternation, leftmost match wins.
_TIME_EXPRESSION = re.compile(
    r"""
    \b\d{1,2}
    (?:
        :\d{2}(?:\s?[ap]m\b)?   # 6:30, 6:30pm, 6:30 PM
        |\s?[ap]m\b             # 6pm, 6 AM
    )
    |\b(?:morning|afternoon|evening|night)s?\b
    """,
    re.IGNORECASE | re.VERBOSE,
)

# Location: first word in this list that appears anywhere wins.
LOCATION_WORDS: tuple[str, ...] = (
    "office",
    "home",
    "street",
    "hospital",
    "store",
    "building",
    "stairs",
    "car",
    "road",
)


def _word_pattern(word: str) -> re.Pattern[str]:
    # whole word, optional plural: "cars" yes, "scared"/"carpet" no
    return re.compile(rf"\b{re.escape(word)}s?\b", re.IGNORECASE)


_LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = tuple(_word_pattern(w) for w in LOCATION_WORDS)


def _stem(keyword: str) -> str:
    # "injury" must also fire on "injured"/"injuries", "robbery" on "robbers".
    if keyword.endswith("y") and len(keyword) > 4:
        return keyword[:-1]
    return keyword


def _contains_any(lowered: str, keywords: tuple[str, ...]) -> bool:
    return any(_stem(keyword) in lowered for keyword in keywords)


def _collect_labels(
    text: str, rules: tuple[tuple[str, tuple[str, ...]], ...], default: str
) -> list[str]:
    lowered = text.lower()
    labels = [label for label, keywords in rules if _contains_any(lowered, keywords)]
    return labels or [default]


def detect_emotions(text: str) -> list[str]:
    """All matching emotion groups, or ``["Neutral"]``."""
    return _collect_labels(text, EMOTION_RULES, DEFAULT_EMOTION)


def detect_tags(text: str) -> list[str]:
    """All matching case-type groups, or ``["General"]``."""
    return _collect_labels(text, TAG_RULES, DEFAULT_TAG)


def extract_timestamp(text: str) -> str:
    match = _TIME_EXPRESSION.search(text)
    return match.group(0) if match else TIME_NOT_SPECIFIED


def extract_location(text: str) -> str:
    for pattern in _LOCATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return LOCATION_NOT_SPECIFIED


def determine_severity(text: str) -> Severity:
    lowered = text.lower()
    if _contains_any(lowered, HIGH_SEVERITY_WORDS):
        return Severity.HIGH
    if _contains_any(lowered, MEDIUM_SEVERITY_WORDS):
        return Severity.MEDIUM
    return Severity.LOW


def extract_signals(text: str) -> ClaimSignals:
    return ClaimSignals(
        emotions=tuple(detect_emotions(text)),
        tags=tuple(detect_tags(text)),
        timestamp=extract_timestamp(text),
        location=extract_location(text),
        severity=determine_severity(text),
    )
