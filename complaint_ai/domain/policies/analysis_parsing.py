"""Strict parsing of the completion text into a PriorityAnalysis.

All or nothing: any syntax error, missing field or out-of-range value raises
MalformedAnalysisError. No field is clamped or defaulted.
"""

from __future__ import annotations

import json
from typing import Any

from complaint_ai.domain.entities.priority_analysis import PriorityAnalysis
from complaint_ai.domain.errors import MalformedAnalysisError
from complaint_ai.domain.value_objects.enums import Priority

PRIORITY_MAP: dict[str, Priority] = {p.value: p for p in Priority}


def parse_analysis(raw_text: str, submitted_category: str | None = None) -> PriorityAnalysis:
    # ValueError also covers integer literals past the int-to-str digit limit
    try:
        parsed = json.loads(raw_text)
    except (ValueError, TypeError) as e:
        raise MalformedAnalysisError(f"Response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedAnalysisError(
            f"Expected a JSON object, got {type(parsed).__name__}"
        )

    return PriorityAnalysis(
        priority=_priority(parsed),
        reasoning=_reasoning(parsed),
        sentiment=_number(parsed, "sentiment", -1.0, 1.0),
        confidence=_confidence(parsed),
        suggested_category=_suggested_category(parsed, submitted_category),
    )


def _require(parsed: dict[str, Any], key: str) -> Any:
    if key not in parsed or parsed[key] is None:
        raise MalformedAnalysisError(f"Missing field: {key}")
    return parsed[key]


def _priority(parsed: dict[str, Any]) -> Priority:
    raw = _require(parsed, "priority")
    if not isinstance(raw, str):
        raise MalformedAnalysisError(f"priority must be a string, got {raw!r}")
    priority = PRIORITY_MAP.get(raw.strip().lower())
    if priority is None:
        raise MalformedAnalysisError(f"Unknown priority: {raw!r}")
    return priority


def _reasoning(parsed: dict[str, Any]) -> str:
    raw = _require(parsed, "reasoning")
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedAnalysisError("reasoning must be a non-empty string")
    return raw


def _number(parsed: dict[str, Any], key: str, low: float, high: float) -> float:
    raw = _require(parsed, key)
    # bool is an int subclass; true/false are not scores
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise MalformedAnalysisError(f"{key} must be a number, got {raw!r}")
    try:
        value = float(raw)
    except OverflowError as e:
        raise MalformedAnalysisError(f"{key} is too large: {e}") from e
    if not low <= value <= high:
        raise MalformedAnalysisError(f"{key} out of range [{low}, {high}]: {value}")
    return value


def _confidence(parsed: dict[str, Any]) -> float:
    value = _number(parsed, "confidence", 0.0, 1.0)
    # 0.0 is reserved for fallback results
    if value == 0.0:
        raise MalformedAnalysisError("confidence of a genuine classification must be > 0")
    return value


def _suggested_category(parsed: dict[str, Any], submitted_category: str | None) -> str | None:
    raw = parsed.get("suggestedCategory")
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise MalformedAnalysisError(f"suggestedCategory must be a string, got {raw!r}")
    suggestion = raw.strip()
    if not suggestion:
        return None
    if submitted_category and suggestion.lower() == submitted_category.strip().lower():
        return None
    return suggestion
