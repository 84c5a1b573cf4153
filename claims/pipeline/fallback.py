from __future__ import annotations

import logging

from claims.errors import ModelUnavailableError, PayloadError
from claims.model import ClaimRecord
from claims.pipeline.heuristic import ClaimStrategy

logger = logging.getLogger(__name__)

ENRICHMENT_FAILURES: tuple[type[Exception], ...] = (PayloadError, ModelUnavailableError)


class FallbackStrategy:
    """Runs *primary*; on an enrichment failure returns *fallback*'s record instead.

    Only the exception types in *recoverable* are absorbed. Configuration,
    authentication, service errors and cancellation propagate untouched.
    """

    def __init__(
        self,
        primary: ClaimStrategy,
        fallback: ClaimStrategy,
        *,
        recoverable: tuple[type[Exception], ...] = ENRICHMENT_FAILURES,
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.recoverable = recoverable
        self.name = primary.name

    async def analyze(self, text: str) -> ClaimRecord:
        try:
            return await self.primary.analyze(text)
        except self.recoverable as exc:
            logger.warning("%s strategy degraded to %s: %s", self.primary.name, self.fallback.name, exc)
            return await self.fallback.analyze(text)
