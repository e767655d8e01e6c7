"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest

from complaint_ai.application.ports.settings_store import SettingsStore
from complaint_ai.domain.entities.complaint import ComplaintSnapshot
from complaint_ai.domain.entities.setting import Setting


class InMemorySettingsStore(SettingsStore):
    """Dict-backed SettingsStore with the same ordering and upsert rules as the SQL store."""

    def __init__(self, initial: dict | None = None):
        self.settings: dict[str, Setting] = {
            k: Setting(key=k, value=v) for k, v in (initial or {}).items()
        }

    async def get(self, key):
        return self.settings.get(key)

    async def upsert(self, key, value, *, updated_by, description=None):
        current = self.settings.get(key)
        setting = Setting(
            key=key,
            value=value,
            description=description or (current.description if current else None),
            category=current.category if current else "system",
            updated_by=updated_by,
        )
        self.settings[key] = setting
        return setting

    async def add_if_absent(self, setting):
        if setting.key in self.settings:
            return False
        self.settings[setting.key] = setting
        return True

    async def list_all(self):
        return sorted(self.settings.values(), key=lambda s: (s.category, s.key))


@pytest.fixture
def make_settings_store():
    return InMemorySettingsStore


@pytest.fixture
def settings_store():
    return InMemorySettingsStore()


@pytest.fixture
def safety_complaint():
    return ComplaintSnapshot(
        title="Driver using phone while driving",
        description="The bus driver was texting on the highway and almost hit a car.",
        category="safety",
        date_time=datetime(2026, 3, 14, 8, 45),
        location="Route 12, Central Station",
        vehicle_number="BUS-4471",
    )


@pytest.fixture
def minimal_complaint():
    return ComplaintSnapshot(
        title="Dirty seats",
        description="Seats on the tram were sticky.",
        category="cleanliness",
        date_time="2026-03-15T17:20:00Z",
    )
