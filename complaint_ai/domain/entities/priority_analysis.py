"""Priority analysis — the outcome of prioritizing one complaint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from complaint_ai.domain.value_objects.enums import Priority

FALLBACK_CONFIDENCE = 0.0


@dataclass(frozen=True)
class PriorityAnalysis:
    """Always fully populated.

    ``confidence == 0.0`` marks a fallback result (classification did not
    genuinely run); a real classification always carries confidence > 0.
    """

    priority: Priority
    reasoning: str
    sentiment: float
    confidence: float
    suggested_category: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.priority, Priority):
            raise ValueError(f"Unknown priority: {self.priority!r}")
        if not -1.0 <= self.sentiment <= 1.0:
            raise ValueError(f"Sentiment out of range: {self.sentiment}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence out of range: {self.confidence}")

    @classmethod
    def fallback(cls, reasoning: str) -> PriorityAnalysis:
        return cls(
            priority=Priority.MEDIUM,
            reasoning=reasoning,
            sentiment=0.0,
            confidence=FALLBACK_CONFIDENCE,
        )

    @property
    def is_fallback(self) -> bool:
        return self.confidence == FALLBACK_CONFIDENCE

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the shape stored on the complaint record."""
        data: dict[str, Any] = {
            "priority": self.priority.value,
            "reasoning": self.reasoning,
            "sentiment": self.sentiment,
            "confidence": self.confidence,
        }
        if self.suggested_category is not None:
            data["suggestedCategory"] = self.suggested_category
        return data
