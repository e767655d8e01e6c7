"""Tests for strict completion-response parsing."""

import json

import pytest

from complaint_ai.domain.errors import MalformedAnalysisError
from complaint_ai.domain.policies.analysis_parsing import parse_analysis
from complaint_ai.domain.value_objects.enums import Priority


def _payload(**overrides):
    data = {"priority": "high", "reasoning": "Safety risk", "sentiment": -0.8, "confidence": 0.9}
    data.update(overrides)
    return json.dumps(data)


def test_parses_valid_response():
    result = parse_analysis(_payload())
    assert result.priority == Priority.HIGH
    assert result.reasoning == "Safety risk"
    assert result.sentiment == -0.8
    assert result.confidence == 0.9
    assert result.suggested_category is None


def test_priority_case_and_whitespace_ignored():
    assert parse_analysis(_payload(priority=" Low ")).priority == Priority.LOW


def test_integer_scores_accepted():
    result = parse_analysis(_payload(sentiment=-1, confidence=1))
    assert result.sentiment == -1.0
    assert result.confidence == 1.0


def test_trailing_comma_is_malformed():
    raw = '{"priority": "high", "reasoning": "x", "sentiment": -0.5, "confidence": 0.7,}'
    with pytest.raises(MalformedAnalysisError):
        parse_analysis(raw)


@pytest.mark.parametrize("raw", ["", "not json", "[1, 2]", '"high"', "null"])
def test_non_object_is_malformed(raw):
    with pytest.raises(MalformedAnalysisError):
        parse_analysis(raw)


@pytest.mark.parametrize("field", ["priority", "reasoning", "sentiment", "confidence"])
def test_missing_required_field_is_malformed(field):
    data = json.loads(_payload())
    del data[field]
    with pytest.raises(MalformedAnalysisError):
        parse_analysis(json.dumps(data))


@pytest.mark.parametrize("overrides", [
    {"priority": "urgent"},
    {"priority": 3},
    {"reasoning": "   "},
    {"sentiment": -1.2},
    {"sentiment": "negative"},
    {"confidence": 1.5},
    {"confidence": True},
    {"confidence": 0},
    {"suggestedCategory": 5},
])
def test_invalid_field_values_are_malformed(overrides):
    with pytest.raises(MalformedAnalysisError):
        parse_analysis(_payload(**overrides))


def test_nan_sentiment_is_malformed():
    raw = '{"priority": "low", "reasoning": "x", "sentiment": NaN, "confidence": 0.5}'
    with pytest.raises(MalformedAnalysisError):
        parse_analysis(raw)


@pytest.mark.parametrize("digits", [400, 5000])
def test_huge_integer_sentiment_is_malformed(digits):
    raw = (
        '{"priority": "low", "reasoning": "x", "sentiment": 1'
        + "0" * digits
        + ', "confidence": 0.5}'
    )
    with pytest.raises(MalformedAnalysisError):
        parse_analysis(raw)


def test_suggested_category_kept_when_different():
    result = parse_analysis(_payload(suggestedCategory="vehicle"), submitted_category="safety")
    assert result.suggested_category == "vehicle"


def test_suggested_category_dropped_when_same_as_submitted():
    result = parse_analysis(_payload(suggestedCategory="Safety"), submitted_category="safety")
    assert result.suggested_category is None


@pytest.mark.parametrize("value", [None, "", "  "])
def test_blank_suggested_category_dropped(value):
    assert parse_analysis(_payload(suggestedCategory=value)).suggested_category is None
