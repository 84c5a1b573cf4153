from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

TIME_NOT_SPECIFIED = "Time not specified"
LOCATION_NOT_SPECIFIED = "Location not specified"

DEFAULT_EMOTION = "Neutral"
DEFAULT_TAG = "General"

EMOTION_VOCABULARY: tuple[str, ...] = ("Physical Distress", "Anxiety", "Frustration", DEFAULT_EMOTION)
TAG_VOCABULARY: tuple[str, ...] = ("Accident", "Medical", "Property Damage", "Theft", DEFAULT_TAG)


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Any) -> "Severity | None":
        """Case-insensitive lookup; None for anything that is not a known level."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True, frozen=True)
class ClaimSignals:
    """Signals pulled out of a claim before the narrative is composed."""

    emotions: tuple[str, ...]
    tags: tuple[str, ...]
    timestamp: str
    location: str
    severity: Severity


@dataclass(slots=True, frozen=True)
class ClaimRecord:
    """Structured result of analysing one claim narrative."""

    narrative: str
    emotions: tuple[str, ...]
    tags: tuple[str, ...]
    timestamp: str
    location: str
    severity: Severity = Severity.LOW
    source: str = field(default="heuristic", compare=False)

    def __post_init__(self) -> None:
        if not self.narrative:
            raise ValueError("ClaimRecord.narrative must not be empty")
        if not self.emotions:
            raise ValueError("ClaimRecord.emotions must not be empty")
        if not self.tags:
            raise ValueError("ClaimRecord.tags must not be empty")
        if not self.timestamp or not self.location:
            raise ValueError("ClaimRecord.timestamp and location must not be empty")
        if not isinstance(self.severity, Severity):
            raise ValueError(f"Unknown severity: {self.severity!r}")

    @classmethod
    def from_signals(cls, narrative: str, signals: ClaimSignals, *, source: str) -> "ClaimRecord":
        return cls(
            narrative=narrative,
            emotions=signals.emotions,
            tags=signals.tags,
            timestamp=signals.timestamp,
            location=signals.location,
            severity=signals.severity,
            source=source,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "structuredText": self.narrative,
            "emotions": list(self.emotions),
            "tags": list(self.tags),
            "timestamp": self.timestamp,
            "location": self.location,
            "severity": self.severity.value,
        }
