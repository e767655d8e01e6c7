"""Setting — one named value in the persistent settings store."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from complaint_ai.domain.value_objects.enums import SettingCategory


@dataclass
class Setting:
    key: str
    value: Any
    description: str | None = None
    category: str = SettingCategory.SYSTEM.value
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


AI_PRIORITIZATION = "aiPrioritization"

DEFAULT_SETTINGS: tuple[Setting, ...] = (
    Setting(
        key=AI_PRIORITIZATION,
        value=True,
        description="Enable AI-powered complaint prioritization",
        category=SettingCategory.AI.value,
    ),
    Setting(
        key="autoAssignment",
        value=True,
        description="Enable automatic complaint assignment",
        category=SettingCategory.SYSTEM.value,
    ),
    Setting(
        key="maintenanceMode",
        value=False,
        description="Enable maintenance mode",
        category=SettingCategory.SYSTEM.value,
    ),
)
