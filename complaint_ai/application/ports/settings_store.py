"""Port interface for the persistent key-value settings store."""

from abc import ABC, abstractmethod
from typing import Any

from complaint_ai.domain.entities.setting import Setting


class SettingsStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Setting | None:
        ...

    @abstractmethod
    async def upsert(
        self,
        key: str,
        value: Any,
        *,
        updated_by: str | None,
        description: str | None = None,
    ) -> Setting:
        """Create or replace the value for *key*. Last writer wins."""
        ...

    @abstractmethod
    async def add_if_absent(self, setting: Setting) -> bool:
        """Insert *setting* unless the key exists. Returns True if inserted.

        Must be atomic (INSERT ... ON CONFLICT DO NOTHING) so concurrent
        seeding never overwrites an existing value.
        """
        ...

    @abstractmethod
    async def list_all(self) -> list[Setting]:
        """Return all settings ordered by category, then key."""
        ...
