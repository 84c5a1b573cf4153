from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from config import CLAIMS_EMOTION_MODEL, CLAIMS_EMOTION_THRESHOLD
from claims.errors import ModelUnavailableError
from claims.model import ClaimRecord, ClaimSignals
from claims.pipeline.composer import compose_narrative
from claims.pipeline.extractor import extract_signals

logger = logging.getLogger(__name__)

Classifier = Callable[[str], Any]
ClassifierFactory = Callable[[str], Classifier]


def load_transformers_classifier(model_name: str) -> Classifier:
    """Builds a multi-label text-classification pipeline. Blocking; run it off the loop."""
    try:
        from transformers import pipeline
    except ImportError as exc:
        raise ModelUnavailableError("transformers is not installed") from exc

    try:
        return pipeline("text-classification", model=model_name, top_k=None)
    except Exception as exc:
        raise ModelUnavailableError(f"Failed to load emotion model {model_name!r}: {exc}") from exc


def select_labels(raw: Any, threshold: float) -> list[str]:
    """Turns ``[{label, score}, ...]`` into labels at or above *threshold*.

    Falls back to the single best label when nothing clears the threshold.
    Batch-shaped output (one nested list) is unwrapped first.
    """
    if isinstance(raw, list) and raw and isinstance(raw[0], list):
        raw = raw[0]
    if not isinstance(raw, list) or not raw:
        raise ModelUnavailableError(f"Unexpected classifier output: {raw!r}")

    scored: list[tuple[str, float]] = []
    for item in raw:
        if not isinstance(item, dict):
            raise ModelUnavailableError(f"Unexpected classifier item: {item!r}")
        label = item.get("label")
        score = item.get("score")
        if not isinstance(label, str) or not label.strip() or not isinstance(score, (int, float)):
            raise ModelUnavailableError(f"Unexpected classifier item: {item!r}")
        scored.append((label.strip(), float(score)))

    labels = [label for label, score in scored if score >= threshold]
    if labels:
        return labels
    best_label, _ = max(scored, key=lambda pair: pair[1])
    return [best_label]


class ModelLoader:
    """Loads the classifier once and shares it.

    Concurrent first callers await one shared load task; a successful load
    is kept for the lifetime of the loader, a failed one is forgotten so the
    next call tries again.
    """

    def __init__(self, model_name: str | None = None, *, factory: ClassifierFactory | None = None) -> None:
        self.model_name = model_name or CLAIMS_EMOTION_MODEL
        self._factory = factory or load_transformers_classifier
        self._model: Classifier | None = None
        self._pending: asyncio.Task[Classifier] | None = None
        self.load_attempts = 0

    @property
    def loaded(self) -> bool:
        return self._model is not None

    async def get(self) -> Classifier:
        if self._model is not None:
            return self._model
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._load())
        # shield: one caller's cancellation must not abort the shared load
        return await asyncio.shield(self._pending)

    async def _load(self) -> Classifier:
        self.load_attempts += 1
        logger.info("Loading emotion model %s", self.model_name)
        try:
            model = await asyncio.to_thread(self._factory, self.model_name)
        except ModelUnavailableError:
            raise
        except Exception as exc:
            raise ModelUnavailableError(f"Failed to load emotion model {self.model_name!r}: {exc}") from exc
        finally:
            self._pending = None
        self._model = model
        return model


class LocalModelStrategy:
    """Model-predicted emotions merged with lexical tags, time, place and severity."""

    name = "local-model"

    def __init__(self, loader: ModelLoader | None = None, *, threshold: float | None = None) -> None:
        self.loader = loader or ModelLoader()
        self.threshold = CLAIMS_EMOTION_THRESHOLD if threshold is None else threshold

    async def classify_emotions(self, text: str) -> list[str]:
        model = await self.loader.get()
        try:
            raw = await asyncio.to_thread(model, text)
        except Exception as exc:
            raise ModelUnavailableError(f"Emotion inference failed: {exc}") from exc
        return select_labels(raw, self.threshold)

    async def analyze(self, text: str) -> ClaimRecord:
        emotions = await self.classify_emotions(text)
        lexical = extract_signals(text)
        signals = ClaimSignals(
            emotions=tuple(emotions),
            tags=lexical.tags,
            timestamp=lexical.timestamp,
            location=lexical.location,
            severity=lexical.severity,
        )
        logger.info("Local model emotions: %s", signals.emotions)
        return ClaimRecord.from_signals(compose_narrative(text, signals), signals, source=self.name)
