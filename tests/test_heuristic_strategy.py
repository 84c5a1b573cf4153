import asyncio

import pytest

from claims.model import LOCATION_NOT_SPECIFIED, TIME_NOT_SPECIFIED, ClaimRecord, Severity
from claims.pipeline.heuristic import HeuristicStrategy

STAIRS_CLAIM = (
    "I fell from stairs in my office at 6pm on Thursday. It was raining outside "
    "and the stairs were slippery. My knee is injured badly."
)
CAR_CLAIM = "This was a serious car crash, my leg is broken."


def test_stairs_claim_scenario():
    record = HeuristicStrategy().analyze_sync(STAIRS_CLAIM)

    assert "Accident" in record.tags
    assert "Medical" in record.tags
    assert record.timestamp == "6pm"
    assert record.location == "office"
    assert record.severity is Severity.MEDIUM
    assert "Physical Distress" in record.emotions
    assert STAIRS_CLAIM in record.narrative
    assert record.source == "heuristic"


def test_car_claim_scenario():
    record = HeuristicStrategy().analyze_sync(CAR_CLAIM)

    assert record.severity is Severity.HIGH
    assert "Accident" in record.tags
    assert "Property Damage" in record.tags
    assert record.location == "car"
    assert record.narrative.endswith("expedited processing timeline.")


def test_async_analyze_matches_sync():
    strategy = HeuristicStrategy()
    assert asyncio.run(strategy.analyze(CAR_CLAIM)) == strategy.analyze_sync(CAR_CLAIM)


@pytest.mark.parametrize(
    "text",
    [
        "x",
        "Nothing happened really.",
        STAIRS_CLAIM,
        CAR_CLAIM,
        "My wallet was stolen in the evening and I am anxious.",
    ],
)
def test_collections_never_empty(text):
    record = HeuristicStrategy().analyze_sync(text)
    assert record.emotions
    assert record.tags
    assert record.narrative


def test_sentinels_without_time_or_location():
    record = HeuristicStrategy().analyze_sync("Something odd happened.")
    assert record.timestamp == TIME_NOT_SPECIFIED
    assert record.location == LOCATION_NOT_SPECIFIED


def test_empty_input_degrades_to_defaults():
    record = HeuristicStrategy().analyze_sync("")

    assert record.emotions == ("Neutral",)
    assert record.tags == ("General",)
    assert record.severity is Severity.LOW
    assert record.timestamp == TIME_NOT_SPECIFIED
    assert record.location == LOCATION_NOT_SPECIFIED
    assert "(no description provided)" in record.narrative


def test_record_wire_shape():
    payload = HeuristicStrategy().analyze_sync(CAR_CLAIM).to_dict()
    assert set(payload) == {"structuredText", "emotions", "tags", "timestamp", "location", "severity"}
    assert payload["severity"] == "high"
    assert isinstance(payload["tags"], list)


def test_record_rejects_empty_emotions():
    with pytest.raises(ValueError):
        ClaimRecord(
            narrative="n",
            emotions=(),
            tags=("General",),
            timestamp=TIME_NOT_SPECIFIED,
            location=LOCATION_NOT_SPECIFIED,
        )
