"""SQLAlchemy repository implementations."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from complaint_ai.adapters.persistence.models import SettingModel
from complaint_ai.application.ports.settings_store import SettingsStore
from complaint_ai.domain.entities.setting import Setting

# ─── Mappers ─────────────────────────────────────────────────────────


def _setting_to_domain(m: SettingModel) -> Setting:
    return Setting(
        key=m.key,
        value=m.value,
        description=m.description,
        category=m.category,
        updated_by=m.updated_by,
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlSettingsStore(SettingsStore):
    """Settings store over the ``settings`` table.

    Holds a session factory rather than a session: the store is shared
    process-wide, so every operation runs in its own short transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get(self, key: str) -> Setting | None:
        async with self._sessions() as s:
            result = await s.execute(select(SettingModel).where(SettingModel.key == key))
            m = result.scalar_one_or_none()
            return _setting_to_domain(m) if m else None

    async def upsert(
        self,
        key: str,
        value: Any,
        *,
        updated_by: str | None,
        description: str | None = None,
    ) -> Setting:
        values: dict[str, Any] = {"value": value, "updated_by": updated_by}
        if description:
            values["description"] = description

        stmt = insert(SettingModel).values(key=key, **values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[SettingModel.key],
            set_={**values, "updated_at": func.now()},
        ).returning(SettingModel)

        async with self._sessions() as s:
            result = await s.execute(stmt)
            m = result.scalar_one()
            setting = _setting_to_domain(m)
            await s.commit()
            return setting

    async def add_if_absent(self, setting: Setting) -> bool:
        stmt = (
            insert(SettingModel)
            .values(
                key=setting.key,
                value=setting.value,
                description=setting.description,
                category=setting.category,
                updated_by=setting.updated_by,
            )
            .on_conflict_do_nothing(index_elements=[SettingModel.key])
            .returning(SettingModel.id)
        )
        async with self._sessions() as s:
            result = await s.execute(stmt)
            inserted = result.scalar_one_or_none() is not None
            await s.commit()
            return inserted

    async def list_all(self) -> list[Setting]:
        async with self._sessions() as s:
            result = await s.execute(
                select(SettingModel).order_by(SettingModel.category, SettingModel.key)
            )
            return [_setting_to_domain(m) for m in result.scalars()]
