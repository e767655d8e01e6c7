"""PrioritizeComplaintUseCase — classify a complaint's priority via LLM."""

from __future__ import annotations

import asyncio
import logging

from complaint_ai.application.ports.completion_port import CompletionClientPort
from complaint_ai.application.use_cases.settings_gate import SettingsGate
from complaint_ai.domain.entities.complaint import ComplaintSnapshot
from complaint_ai.domain.entities.priority_analysis import PriorityAnalysis
from complaint_ai.domain.entities.setting import AI_PRIORITIZATION
from complaint_ai.domain.errors import (
    ClassificationQuotaError,
    ClassificationTimeoutError,
    ClassificationUnavailableError,
    MalformedAnalysisError,
)
from complaint_ai.domain.policies.analysis_parsing import parse_analysis
from complaint_ai.domain.policies.complaint_prompt import SYSTEM_PROMPT, build_user_prompt
from complaint_ai.domain.value_objects.enums import FailureKind

logger = logging.getLogger(__name__)

DISABLED_REASONING = "AI prioritization disabled by administrator, defaulting to medium"
NO_CLIENT_REASONING = "AI disabled or misconfigured, defaulting to medium"
UNAVAILABLE_REASONING = "AI analysis unavailable, using default priority"

DEFAULT_MAX_TOKENS = 300
DEFAULT_TEMPERATURE = 0.3
DEFAULT_TIMEOUT_SECONDS = 20.0


class PrioritizeComplaintUseCase:
    """Produces a PriorityAnalysis for one complaint. Never raises.

    Every failure resolves to a medium-priority fallback with confidence 0,
    so complaint submission never fails because of classification trouble.
    """

    def __init__(
        self,
        settings_gate: SettingsGate,
        client: CompletionClientPort | None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._gate = settings_gate
        self._client = client
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._timeout = timeout_seconds

    async def execute(self, complaint: ComplaintSnapshot) -> PriorityAnalysis:
        """Classify *complaint*.

        Pipeline:
        1. Settings flag check (aiPrioritization)
        2. Client presence check
        3. Prompt construction
        4. One completion call, bounded by a wall-clock timeout
        5. Strict response parsing
        """
        if not await self._gate.get_flag(AI_PRIORITIZATION, True):
            logger.info("AI prioritization disabled, using default priority")
            return PriorityAnalysis.fallback(DISABLED_REASONING)

        if self._client is None:
            return PriorityAnalysis.fallback(NO_CLIENT_REASONING)

        try:
            raw_text = await asyncio.wait_for(
                self._client.complete(
                    SYSTEM_PROMPT,
                    build_user_prompt(complaint),
                    max_tokens=self._max_tokens,
                    temperature=self._temperature,
                ),
                timeout=self._timeout,
            )
            analysis = parse_analysis(raw_text, submitted_category=complaint.category)
        except Exception as e:
            _log_failure(classify_failure(e), e)
            return PriorityAnalysis.fallback(UNAVAILABLE_REASONING)

        logger.info(
            "Complaint '%s' prioritized: priority=%s, confidence=%.2f",
            complaint.title, analysis.priority.value, analysis.confidence,
        )
        return analysis


def classify_failure(error: BaseException) -> FailureKind:
    """Map an exception to a FailureKind. Affects logging only."""
    if isinstance(error, ClassificationQuotaError):
        return FailureKind.QUOTA
    # Raw SDK errors from clients that do not translate them
    if getattr(error, "status_code", None) == 429 or getattr(error, "code", None) == "insufficient_quota":
        return FailureKind.QUOTA
    if isinstance(error, (ClassificationTimeoutError, asyncio.TimeoutError, TimeoutError)):
        return FailureKind.TIMEOUT
    if isinstance(error, MalformedAnalysisError):
        return FailureKind.MALFORMED
    if isinstance(error, (ClassificationUnavailableError, ConnectionError)):
        return FailureKind.TRANSIENT
    return FailureKind.UNEXPECTED


def _log_failure(kind: FailureKind, error: BaseException) -> None:
    if kind is FailureKind.QUOTA:
        logger.warning("Completion service quota exceeded, using default priority")
    elif kind is FailureKind.MALFORMED:
        logger.warning("Could not parse completion response, using default priority: %s", error)
    elif kind is FailureKind.TIMEOUT:
        logger.error("Completion service timed out, using default priority")
    elif kind is FailureKind.TRANSIENT:
        logger.error("Completion service error, using default priority: %s", error)
    else:
        logger.error(
            "Unexpected error during prioritization, using default priority",
            exc_info=error,
        )
