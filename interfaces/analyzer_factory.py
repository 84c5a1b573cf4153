from __future__ import annotations

import logging
from dataclasses import dataclass

from config import CLAIMS_API_KEY, CLAIMS_STRATEGY, CLAIMS_VOCABULARY_POLICY
from claims.model import ClaimRecord
from claims.pipeline.selector import analyze_claim, resolve_strategy_name
from claims.pipeline.vocabulary import VocabularyPolicy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ClaimAnalyzer:
    credential: str | None
    strategy: str
    vocabulary_policy: VocabularyPolicy

    async def analyze(self, text: str) -> ClaimRecord:
        return await analyze_claim(
            text,
            credential=self.credential,
            strategy=self.strategy,
            vocabulary_policy=self.vocabulary_policy,
        )


def build_analyzer(
    credential: str | None = None,
    strategy: str | None = None,
    vocabulary_policy: str | None = None,
) -> ClaimAnalyzer:
    """Analyzer wired from explicit arguments, falling back to environment settings."""
    resolved_credential = credential or CLAIMS_API_KEY or None
    resolved_strategy = resolve_strategy_name(resolved_credential, strategy or CLAIMS_STRATEGY)
    policy = VocabularyPolicy.from_name(vocabulary_policy or CLAIMS_VOCABULARY_POLICY)
    logger.info("Claim analyzer: strategy=%s vocabulary=%s", resolved_strategy, policy.value)
    return ClaimAnalyzer(
        credential=resolved_credential,
        strategy=resolved_strategy,
        vocabulary_policy=policy,
    )
