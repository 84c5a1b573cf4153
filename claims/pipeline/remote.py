from __future__ import annotations

import logging

from claims.errors import ConfigurationError
from claims.llm.parser import parse_json_payload, repair_record_payload, validate_record_payload
from claims.llm_client import LLMClient, OpenAIClaimClient
from claims.model import ClaimRecord
from claims.pipeline.heuristic import HeuristicStrategy

logger = logging.getLogger(__name__)


class RemoteStrategy:
    """Delegates analysis to a chat-completion service.

    Status and transport failures surface as ``AuthenticationError`` /
    ``ServiceError``. An unusable completion raises ``PayloadError`` so the
    surrounding ``FallbackStrategy`` can substitute the heuristic record;
    a partial one is repaired here field by field.
    """

    name = "remote"

    def __init__(
        self,
        credential: str | None,
        *,
        llm_client: LLMClient | None = None,
        heuristic: HeuristicStrategy | None = None,
    ) -> None:
        if not credential:
            raise ConfigurationError("The remote strategy requires a credential")
        self.llm_client = llm_client or OpenAIClaimClient(api_key=credential)
        self.heuristic = heuristic or HeuristicStrategy()

    async def analyze(self, text: str) -> ClaimRecord:
        logger.info("Remote claim analysis: %d chars", len(text))
        content = await self.llm_client.complete_claim(text)

        data = parse_json_payload(content)
        present = validate_record_payload(data)
        fallback_narrative = ""
        if "structuredText" not in present:
            fallback_narrative = self.heuristic.analyze_sync(text).narrative
        return repair_record_payload(present, fallback_narrative=fallback_narrative)
