"""Port interface for the complaint store (owned by the caller)."""

from abc import ABC, abstractmethod

from complaint_ai.domain.entities.complaint import ComplaintSnapshot
from complaint_ai.domain.entities.priority_analysis import PriorityAnalysis


class ComplaintRepository(ABC):
    @abstractmethod
    async def get_snapshot(self, complaint_id: str) -> ComplaintSnapshot | None:
        ...

    @abstractmethod
    async def attach_analysis(self, complaint_id: str, analysis: PriorityAnalysis) -> None:
        """Store *analysis* on the complaint and copy its priority onto the record."""
        ...
