"""SettingsGate — read, write and seed named operational flags."""

from __future__ import annotations

import logging
from typing import Any

from complaint_ai.application.ports.settings_store import SettingsStore
from complaint_ai.domain.entities.setting import DEFAULT_SETTINGS, Setting

logger = logging.getLogger(__name__)


class SettingsGate:
    """Flag access over an injected SettingsStore.

    Reads never raise (a broken store means "use the default"); writes
    propagate store errors to the administrative caller.
    """

    def __init__(self, store: SettingsStore, defaults: tuple[Setting, ...] = DEFAULT_SETTINGS):
        self._store = store
        self._defaults = defaults

    async def get_flag(self, name: str, default: bool) -> bool:
        try:
            setting = await self._store.get(name)
        except Exception:
            logger.exception("Error reading setting %s, using default=%s", name, default)
            return default

        if setting is None:
            return default
        return _coerce_flag(name, setting.value, default)

    async def set_flag(
        self,
        name: str,
        value: Any,
        actor: str | None,
        description: str | None = None,
    ) -> Setting:
        setting = await self._store.upsert(
            name, value, updated_by=actor, description=description
        )
        logger.info("Setting %s set to %r by %s", name, value, actor or "unknown")
        return setting

    async def seed_defaults(self) -> list[str]:
        """Insert each default setting that is missing. Returns created keys."""
        created: list[str] = []
        for default in self._defaults:
            if await self._store.add_if_absent(_copy(default)):
                logger.info("Initialized default setting: %s", default.key)
                created.append(default.key)
        return created

    async def list_settings(self) -> dict[str, Any]:
        return {s.key: s.value for s in await self._store.list_all()}


def _coerce_flag(name: str, value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    logger.warning(
        "Setting %s has non-boolean value %r, using default=%s", name, value, default
    )
    return default


def _copy(setting: Setting) -> Setting:
    return Setting(
        key=setting.key,
        value=setting.value,
        description=setting.description,
        category=setting.category,
    )
