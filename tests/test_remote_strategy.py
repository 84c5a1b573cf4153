import asyncio
import json

import pytest

from claims.errors import AuthenticationError, ConfigurationError, PayloadError, ServiceError
from claims.model import Severity
from claims.pipeline.heuristic import HeuristicStrategy
from claims.pipeline.remote import RemoteStrategy

CLAIM = "Someone broke into my car on the street last night and my laptop was stolen. I am worried."


class FakeLLMClient:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls = 0

    async def complete_claim(self, text: str) -> str | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.content


def test_remote_requires_credential():
    with pytest.raises(ConfigurationError):
        RemoteStrategy(None, llm_client=FakeLLMClient("{}"))
    with pytest.raises(ConfigurationError):
        RemoteStrategy("", llm_client=FakeLLMClient("{}"))


def test_remote_full_response():
    content = json.dumps(
        {
            "structuredText": "The claimant reports a vehicle break-in.",
            "emotions": ["Anxiety", "Violation"],
            "tags": ["Theft", "Property Damage"],
            "timestamp": "night",
            "location": "street",
            "severity": "medium",
        }
    )
    record = asyncio.run(RemoteStrategy("key", llm_client=FakeLLMClient(content)).analyze(CLAIM))

    assert record.narrative == "The claimant reports a vehicle break-in."
    assert record.emotions == ("Anxiety", "Violation")
    assert record.tags == ("Theft", "Property Damage")
    assert record.timestamp == "night"
    assert record.location == "street"
    assert record.severity is Severity.MEDIUM
    assert record.source == "remote"


def test_remote_partial_response_is_repaired():
    content = '```json\n{"tags": ["Theft"], "severity": "high"}\n```'
    record = asyncio.run(RemoteStrategy("key", llm_client=FakeLLMClient(content)).analyze(CLAIM))

    assert record.tags == ("Theft",)
    assert record.severity is Severity.HIGH
    assert record.emotions == ("Neutral",)
    assert record.timestamp == "Time not specified"
    assert record.location == "Location not specified"
    assert record.narrative == HeuristicStrategy().analyze_sync(CLAIM).narrative


def test_remote_missing_severity_defaults_to_medium():
    content = json.dumps({"structuredText": "Narrative.", "emotions": ["Anxiety"]})
    record = asyncio.run(RemoteStrategy("key", llm_client=FakeLLMClient(content)).analyze(CLAIM))
    assert record.severity is Severity.MEDIUM


@pytest.mark.parametrize("content", [None, "", "I'm sorry, I can't do that.", '{"unrelated": 1}', "[]"])
def test_remote_unusable_completion_raises_payload_error(content):
    strategy = RemoteStrategy("key", llm_client=FakeLLMClient(content))
    with pytest.raises(PayloadError):
        asyncio.run(strategy.analyze(CLAIM))


def test_remote_propagates_authentication_error():
    strategy = RemoteStrategy("bad-key", llm_client=FakeLLMClient(error=AuthenticationError("rejected")))
    with pytest.raises(AuthenticationError):
        asyncio.run(strategy.analyze(CLAIM))


def test_remote_propagates_service_error():
    strategy = RemoteStrategy("key", llm_client=FakeLLMClient(error=ServiceError("boom", status_code=500)))
    with pytest.raises(ServiceError) as excinfo:
        asyncio.run(strategy.analyze(CLAIM))
    assert excinfo.value.status_code == 500
