from __future__ import annotations

from claims.model import LOCATION_NOT_SPECIFIED, ClaimSignals, Severity

_EMPTY_DESCRIPTION = "(no description provided)"


def _as_sentence(text: str) -> str:
    return text if text[-1] in ".!?" else f"{text}."


def _joined_lower(labels: tuple[str, ...]) -> str:
    return " and ".join(labels).lower()


def compose_narrative(text: str, signals: ClaimSignals) -> str:
    """Three-paragraph professional narrative built from extracted signals."""
    where = f" at {signals.location}" if signals.location != LOCATION_NOT_SPECIFIED else ""
    description = text.strip() or _EMPTY_DESCRIPTION

    incident = (
        f"The claimant has reported an incident that occurred {signals.timestamp}{where}. "
        f"Based on the provided information, this appears to be a {_joined_lower(signals.tags)} case. "
        f"The claimant describes the following circumstances: {_as_sentence(description)}"
    )
    context = (
        f"The emotional state of the claimant suggests {_joined_lower(signals.emotions)}, "
        "which is consistent with the nature of the reported incident. "
        f"This claim requires {signals.severity.value} priority processing "
        "based on the described circumstances and impact."
    )
    timeline = "expedited" if signals.severity is Severity.HIGH else "routine"
    recommendation = (
        "Recommendation: Proceed with standard verification procedures and "
        f"{timeline} processing timeline."
    )
    return "\n\n".join((incident, context, recommendation)).strip()
