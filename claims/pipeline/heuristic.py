from __future__ import annotations

import logging
from typing import Protocol

from claims.model import ClaimRecord
from claims.pipeline.composer import compose_narrative
from claims.pipeline.extractor import extract_signals

logger = logging.getLogger(__name__)


class ClaimStrategy(Protocol):
    name: str

    async def analyze(self, text: str) -> ClaimRecord: ...


class HeuristicStrategy:
    """Keyword rules plus the narrative template. Never suspends, never fails."""

    name = "heuristic"

    def analyze_sync(self, text: str) -> ClaimRecord:
        signals = extract_signals(text)
        logger.debug(
            "Heuristic signals: emotions=%s tags=%s severity=%s",
            signals.emotions,
            signals.tags,
            signals.severity.value,
        )
        return ClaimRecord.from_signals(compose_narrative(text, signals), signals, source=self.name)

    async def analyze(self, text: str) -> ClaimRecord:
        return self.analyze_sync(text)
