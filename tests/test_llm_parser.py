import logging

import pytest

from claims.errors import PayloadError
from claims.llm.parser import parse_json_payload, repair_record_payload, validate_record_payload
from claims.model import LOCATION_NOT_SPECIFIED, TIME_NOT_SPECIFIED, Severity


# ── parse_json_payload ──────────────────────────────────────────


def test_parse_plain_object():
    assert parse_json_payload('{"severity": "high"}') == {"severity": "high"}


def test_parse_fenced_json():
    raw = '```json\n{"tags": ["Theft"]}\n```'
    assert parse_json_payload(raw) == {"tags": ["Theft"]}


def test_parse_think_tag():
    raw = '<think>weighing the evidence</think>{"tags": ["Theft"]}'
    assert parse_json_payload(raw) == {"tags": ["Theft"]}


def test_parse_object_with_surrounding_prose():
    raw = 'Here is the analysis: {"location": "road"} Hope this helps.'
    assert parse_json_payload(raw) == {"location": "road"}


@pytest.mark.parametrize("raw", [None, "", "   ", "not json at all", "{broken", "[1, 2, 3]"])
def test_parse_rejects_unusable_text(raw):
    with pytest.raises(PayloadError):
        parse_json_payload(raw)


# ── validate_record_payload ─────────────────────────────────────


def test_validate_keeps_well_formed_fields():
    present = validate_record_payload(
        {
            "structuredText": "  Narrative.  ",
            "emotions": ["Anxiety", " ", 3],
            "tags": "Theft",
            "severity": "HIGH",
        }
    )
    assert present == {
        "structuredText": "Narrative.",
        "emotions": ("Anxiety",),
        "tags": ("Theft",),
        "severity": Severity.HIGH,
    }


def test_validate_drops_invalid_values():
    present = validate_record_payload({"severity": "catastrophic", "emotions": [], "location": "home"})
    assert present == {"location": "home"}


def test_validate_rejects_object_without_record_fields():
    with pytest.raises(PayloadError):
        validate_record_payload({"answer": "I cannot help with that"})


def test_validate_logs_missing_fields(caplog):
    with caplog.at_level(logging.INFO, logger="claims.llm.parser"):
        validate_record_payload({"tags": ["Theft"]})
    assert "missing fields" in caplog.text


# ── repair_record_payload ───────────────────────────────────────


def test_repair_fills_fixed_defaults():
    record = repair_record_payload({"tags": ("Theft",)}, fallback_narrative="Composed narrative.")

    assert record.narrative == "Composed narrative."
    assert record.emotions == ("Neutral",)
    assert record.tags == ("Theft",)
    assert record.timestamp == TIME_NOT_SPECIFIED
    assert record.location == LOCATION_NOT_SPECIFIED
    assert record.severity is Severity.MEDIUM
    assert record.source == "remote"


def test_repair_keeps_complete_payload():
    present = {
        "structuredText": "Remote narrative.",
        "emotions": ("Shock",),
        "tags": ("Vehicle",),
        "timestamp": "dawn",
        "location": "bridge",
        "severity": Severity.LOW,
    }
    record = repair_record_payload(present, fallback_narrative="unused")
    assert record.narrative == "Remote narrative."
    assert record.emotions == ("Shock",)
    assert record.severity is Severity.LOW
