"""Pure parsing steps for the completion service response.

parse_json_payload → validate_record_payload → repair_record_payload.
Each step raises ``PayloadError``; the caller owns the single fallback.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any

from claims.errors import PayloadError
from claims.model import (
    DEFAULT_EMOTION,
    DEFAULT_TAG,
    LOCATION_NOT_SPECIFIED,
    TIME_NOT_SPECIFIED,
    ClaimRecord,
    Severity,
)

logger = logging.getLogger(__name__)

RECORD_FIELDS: tuple[str, ...] = ("structuredText", "emotions", "tags", "timestamp", "location", "severity")
DEFAULT_REMOTE_SEVERITY = Severity.MEDIUM


def parse_json_payload(payload: str | None) -> dict[str, Any]:
    """Parses completion JSON, tolerating fenced blocks and <think> tags."""
    if payload is None or not payload.strip():
        raise PayloadError("completion text is empty")

    cleaned = payload.strip()
    fenced = re.search(r"```(?:json)?\s*(.*?)\s*```", cleaned, flags=re.IGNORECASE | re.DOTALL)
    if fenced:
        cleaned = fenced.group(1).strip()

    if "</think>" in cleaned:
        cleaned = cleaned.split("</think>", 1)[1].strip()

    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")
    if first_brace != -1 and last_brace != -1 and last_brace > first_brace:
        cleaned = cleaned[first_brace : last_brace + 1]

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise PayloadError(f"completion is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise PayloadError(f"completion JSON is {type(data).__name__}, expected object")
    return data


def _clean_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _clean_labels(value: Any) -> tuple[str, ...] | None:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return None
    labels = tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
    return labels or None


def validate_record_payload(data: dict[str, Any]) -> dict[str, Any]:
    """Keeps only well-formed record fields; fails when none survive."""
    cleaned: dict[str, Any] = {
        "structuredText": _clean_text(data.get("structuredText")),
        "emotions": _clean_labels(data.get("emotions")),
        "tags": _clean_labels(data.get("tags")),
        "timestamp": _clean_text(data.get("timestamp")),
        "location": _clean_text(data.get("location")),
        "severity": Severity.parse(data.get("severity")),
    }
    present = {key: value for key, value in cleaned.items() if value is not None}
    if not present:
        raise PayloadError(f"completion has none of the record fields; keys={sorted(data)[:10]}")

    missing = [key for key in RECORD_FIELDS if key not in present]
    if missing:
        logger.info("Completion missing fields, repairing: %s", missing)
    return present


def repair_record_payload(present: dict[str, Any], *, fallback_narrative: str) -> ClaimRecord:
    """Fills absent fields with fixed defaults and builds the record."""
    return ClaimRecord(
        narrative=present.get("structuredText") or fallback_narrative,
        emotions=present.get("emotions") or (DEFAULT_EMOTION,),
        tags=present.get("tags") or (DEFAULT_TAG,),
        timestamp=present.get("timestamp") or TIME_NOT_SPECIFIED,
        location=present.get("location") or LOCATION_NOT_SPECIFIED,
        severity=present.get("severity") or DEFAULT_REMOTE_SEVERITY,
        source="remote",
    )
