from __future__ import annotations

import asyncio

# Cancellation is the standard asyncio one; re-exported so callers can import
# the whole taxonomy from one place.
CancelledError = asyncio.CancelledError


class ClaimAnalysisError(RuntimeError):
    pass


class ConfigurationError(ClaimAnalysisError):
    """A required credential or setting is missing for the chosen strategy."""


class AuthenticationError(ClaimAnalysisError):
    """The completion service rejected the credential."""


class ServiceError(ClaimAnalysisError):
    """The completion service failed with a non-success status or was unreachable."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PayloadError(ClaimAnalysisError):
    """Completion text could not be turned into a record. Never leaves the pipeline."""


class ModelUnavailableError(ClaimAnalysisError):
    """The local classifier could not be loaded or run. Never leaves the pipeline."""


__all__ = [
    "AuthenticationError",
    "CancelledError",
    "ClaimAnalysisError",
    "ConfigurationError",
    "ModelUnavailableError",
    "PayloadError",
    "ServiceError",
]
