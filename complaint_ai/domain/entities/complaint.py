"""Complaint snapshot — the read-only view of a complaint that gets prioritized."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

NOT_SPECIFIED = "Not specified"


@dataclass(frozen=True)
class ComplaintSnapshot:
    title: str
    description: str
    category: str
    date_time: datetime | str
    location: str | None = None
    vehicle_number: str | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Complaint title must not be empty")
        if not self.description or not self.description.strip():
            raise ValueError("Complaint description must not be empty")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ComplaintSnapshot:
        """Build a snapshot from a stored complaint record (camelCase keys)."""
        return cls(
            title=record["title"],
            description=record["description"],
            category=record["category"],
            date_time=record["dateTime"],
            location=record.get("location") or None,
            vehicle_number=record.get("vehicleNumber") or None,
        )

    def incident_time_display(self) -> str:
        if isinstance(self.date_time, datetime):
            return self.date_time.isoformat()
        return str(self.date_time)

    def location_display(self) -> str:
        return _or_not_specified(self.location)

    def vehicle_display(self) -> str:
        return _or_not_specified(self.vehicle_number)


def _or_not_specified(value: str | None) -> str:
    if value and value.strip():
        return value.strip()
    return NOT_SPECIFIED
