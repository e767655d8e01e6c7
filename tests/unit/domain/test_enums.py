"""Tests for domain enums."""

from complaint_ai.domain.value_objects.enums import ComplaintCategory, Priority


def test_priority_values():
    assert {p.value for p in Priority} == {"high", "medium", "low"}


def test_priority_is_str():
    assert Priority.HIGH == "high"


def test_complaint_categories():
    assert {c.value for c in ComplaintCategory} == {
        "service", "safety", "accessibility", "cleanliness",
        "staff", "vehicle", "schedule", "other",
    }
