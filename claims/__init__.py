from __future__ import annotations

from claims.errors import (
    AuthenticationError,
    CancelledError,
    ClaimAnalysisError,
    ConfigurationError,
    ServiceError,
)
from claims.model import ClaimRecord, Severity
from claims.pipeline.selector import analyze_claim, analyze_claim_sync, select_strategy

__all__ = [
    "AuthenticationError",
    "CancelledError",
    "ClaimAnalysisError",
    "ClaimRecord",
    "ConfigurationError",
    "ServiceError",
    "Severity",
    "analyze_claim",
    "analyze_claim_sync",
    "select_strategy",
]
