"""OpenAI-compatible adapter — implements CompletionClientPort.

Works against any OpenAI-compatible chat-completions endpoint. Groq is the
default provider (via its OpenAI-compatible base URL); OpenAI itself is the
alternative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
import openai
from openai import AsyncOpenAI

from complaint_ai.application.ports.completion_port import CompletionClientPort
from complaint_ai.config import Settings
from complaint_ai.domain.errors import (
    ClassificationQuotaError,
    ClassificationTimeoutError,
    ClassificationUnavailableError,
    MalformedAnalysisError,
)

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 5.0

PLACEHOLDER_PREFIXES = ("gsk-your_", "sk-your_", "your-")


@dataclass(frozen=True)
class ProviderProfile:
    name: str
    base_url: str | None
    key_env: str


PROVIDERS: dict[str, ProviderProfile] = {
    "groq": ProviderProfile(
        name="groq",
        base_url="https://api.groq.com/openai/v1",
        key_env="GROQ_API_KEY",
    ),
    "openai": ProviderProfile(
        name="openai",
        base_url=None,
        key_env="OPENAI_API_KEY",
    ),
}


class OpenAICompletionClient(CompletionClientPort):
    """Chat-completions client with an explicit timeout and no SDK retries."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 20.0,
        json_mode: bool = True,
    ):
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=httpx.Timeout(timeout_seconds, connect=CONNECT_TIMEOUT_SECONDS),
            max_retries=0,
        )
        self._model = model
        self._json_mode = json_mode

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        kwargs = {}
        if self._json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
                **kwargs,
            )
        except openai.APIError as e:
            raise translate_api_error(e) from e

        if not response.choices:
            raise MalformedAnalysisError("Completion returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise MalformedAnalysisError("Completion returned empty content")
        return content


def translate_api_error(
    error: openai.APIError,
) -> ClassificationQuotaError | ClassificationTimeoutError | ClassificationUnavailableError:
    """Map an OpenAI SDK error onto the classification error taxonomy."""
    if isinstance(error, openai.RateLimitError) or error.code == "insufficient_quota":
        return ClassificationQuotaError(str(error))
    # APITimeoutError subclasses APIConnectionError, so check it first
    if isinstance(error, openai.APITimeoutError):
        return ClassificationTimeoutError(str(error))
    if isinstance(error, openai.APIConnectionError):
        return ClassificationUnavailableError(f"Connection error: {error}")
    if isinstance(error, openai.APIStatusError):
        return ClassificationUnavailableError(
            f"Completion service returned {error.status_code}: {error.message}",
            status_code=error.status_code,
        )
    return ClassificationUnavailableError(str(error))


def is_placeholder_key(api_key: str | None) -> bool:
    key = (api_key or "").strip()
    return not key or key.startswith(PLACEHOLDER_PREFIXES)


def create_completion_client(settings: Settings) -> OpenAICompletionClient | None:
    """Build the completion client once, or return None if AI is unconfigured.

    A missing or placeholder API key, an unknown provider, or an SDK that
    refuses the configuration all yield None, logged here and only here.
    """
    provider = PROVIDERS.get(settings.llm_provider.strip().lower())
    if provider is None:
        logger.warning(
            "Unknown LLM_PROVIDER %r; AI features disabled.", settings.llm_provider
        )
        return None

    if provider.name == "groq":
        api_key, model = settings.groq_api_key, settings.groq_model
    else:
        api_key, model = settings.openai_api_key, settings.openai_model

    if is_placeholder_key(api_key):
        logger.warning("%s not set or is placeholder; AI features disabled.", provider.key_env)
        return None

    try:
        client = OpenAICompletionClient(
            api_key=api_key.strip(),
            model=model,
            base_url=provider.base_url,
            timeout_seconds=settings.ai_request_timeout_seconds,
            json_mode=settings.ai_json_mode,
        )
    except Exception as e:
        logger.warning("Failed to initialize %s client: %s", provider.name, e)
        return None

    logger.info("Using %s completion client (model=%s)", provider.name, model)
    return client
