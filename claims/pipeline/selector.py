"""Single entry point: pick a strategy for a claim and run it.

Selection policy when no strategy is named: ``remote`` if a credential is
supplied, otherwise ``heuristic``. The local model is opt-in only.
Enrichment strategies are wrapped so that parse and model failures degrade
to the heuristic record; configuration, authentication, service errors and
cancellation reach the caller.
"""

from __future__ import annotations

import asyncio
import logging

from config import CLAIMS_VOCABULARY_POLICY
from claims.errors import ConfigurationError
from claims.llm_client import LLMClient
from claims.model import ClaimRecord
from claims.pipeline.fallback import FallbackStrategy
from claims.pipeline.heuristic import ClaimStrategy, HeuristicStrategy
from claims.pipeline.local_model import LocalModelStrategy, ModelLoader
from claims.pipeline.remote import RemoteStrategy
from claims.pipeline.vocabulary import VocabularyPolicy, apply_policy

logger = logging.getLogger(__name__)

HEURISTIC = "heuristic"
REMOTE = "remote"
LOCAL_MODEL = "local-model"
STRATEGY_NAMES: tuple[str, ...] = (HEURISTIC, REMOTE, LOCAL_MODEL)

# Shared so the classifier is loaded at most once per process.
DEFAULT_MODEL_LOADER = ModelLoader()


def resolve_strategy_name(credential: str | None = None, strategy: str | None = None) -> str:
    if strategy:
        name = strategy.strip().lower()
        if name not in STRATEGY_NAMES:
            raise ConfigurationError(f"Unknown strategy {strategy!r}; expected one of {', '.join(STRATEGY_NAMES)}")
        return name
    return REMOTE if credential else HEURISTIC


def select_strategy(
    credential: str | None = None,
    strategy: str | None = None,
    *,
    llm_client: LLMClient | None = None,
    model_loader: ModelLoader | None = None,
) -> ClaimStrategy:
    name = resolve_strategy_name(credential, strategy)
    heuristic = HeuristicStrategy()
    if name == REMOTE:
        remote = RemoteStrategy(credential, llm_client=llm_client, heuristic=heuristic)
        return FallbackStrategy(remote, heuristic)
    if name == LOCAL_MODEL:
        local = LocalModelStrategy(model_loader or DEFAULT_MODEL_LOADER)
        return FallbackStrategy(local, heuristic)
    return heuristic


async def analyze_claim(
    text: str,
    *,
    credential: str | None = None,
    strategy: str | None = None,
    vocabulary_policy: VocabularyPolicy | str | None = None,
    llm_client: LLMClient | None = None,
    model_loader: ModelLoader | None = None,
) -> ClaimRecord:
    """Analyses one claim narrative and returns its structured record.

    Raises:
        ConfigurationError: unknown strategy, or ``remote`` without a credential.
        AuthenticationError: the completion service rejected the credential.
        ServiceError: the completion service failed or was unreachable.
        asyncio.CancelledError: the awaiting task was cancelled.
    """
    policy = (
        vocabulary_policy
        if isinstance(vocabulary_policy, VocabularyPolicy)
        else VocabularyPolicy.from_name(vocabulary_policy or CLAIMS_VOCABULARY_POLICY)
    )
    selected = select_strategy(credential, strategy, llm_client=llm_client, model_loader=model_loader)

    if not text.strip():
        logger.warning("Blank claim text, skipping %s strategy", selected.name)
        selected = HeuristicStrategy()

    logger.info("Analysing claim with %s strategy", selected.name)
    record = await selected.analyze(text)
    return apply_policy(record, policy)


def analyze_claim_sync(text: str, **options) -> ClaimRecord:
    """Blocking wrapper for callers without a running event loop."""
    return asyncio.run(analyze_claim(text, **options))
