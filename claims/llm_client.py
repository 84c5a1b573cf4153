from __future__ import annotations

import logging
from typing import Any, Protocol

from openai import APIConnectionError, APIResponseValidationError, APIStatusError, AsyncOpenAI
from openai import AuthenticationError as OpenAIAuthenticationError

from config import (
    CLAIMS_BASE_URL,
    CLAIMS_MAX_TOKENS,
    CLAIMS_MODEL_ID,
    CLAIMS_REQUEST_TIMEOUT,
    CLAIMS_TEMPERATURE,
)
from claims.errors import AuthenticationError, ConfigurationError, PayloadError, ServiceError
from claims.llm.prompts import SYSTEM_PROMPT_CLAIM_ANALYST

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    async def complete_claim(self, text: str) -> str | None: ...


class OpenAIClaimClient:
    """Chat-completion client for claim analysis over an OpenAI-compatible API.

    Makes exactly one request per call (``max_retries=0``); transport and
    status failures are translated into the claims error taxonomy.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model_id: str | None = None,
        base_url: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
        client: Any | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("A credential is required for the remote strategy")
        self.api_key = api_key
        self.model_id = model_id or CLAIMS_MODEL_ID
        self.base_url = base_url or CLAIMS_BASE_URL
        self.temperature = CLAIMS_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or CLAIMS_MAX_TOKENS
        self.timeout = timeout or CLAIMS_REQUEST_TIMEOUT

        self._client: Any | None = client

    async def complete_claim(self, text: str) -> str | None:
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model_id,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT_CLAIM_ANALYST},
                    {"role": "user", "content": text},
                ],
            )
        except OpenAIAuthenticationError as exc:
            logger.error("Completion service rejected the credential: %s", exc)
            raise AuthenticationError("The completion service rejected the credential") from exc
        except APIStatusError as exc:
            logger.error("Completion service returned HTTP %s", exc.status_code)
            raise ServiceError(
                f"Completion service returned HTTP {exc.status_code}", status_code=exc.status_code
            ) from exc
        except APIConnectionError as exc:
            logger.error("Completion service unreachable: %s", exc)
            raise ServiceError(f"Completion service unreachable: {exc}") from exc
        except (APIResponseValidationError, ValueError) as exc:
            # HTTP 200 with a body the SDK cannot decode
            logger.warning("Completion response body is unreadable: %s", exc)
            raise PayloadError(f"Completion response body is unreadable: {exc}") from exc

        usage = getattr(completion, "usage", None)
        if usage:
            logger.info(
                "Claim LLM tokens: prompt=%s completion=%s total=%s",
                getattr(usage, "prompt_tokens", "?"),
                getattr(usage, "completion_tokens", "?"),
                getattr(usage, "total_tokens", "?"),
            )

        choices = getattr(completion, "choices", None)
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        logger.debug("Claim LLM raw response: %r", content)
        return content

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client
