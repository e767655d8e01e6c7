"""ReprioritizeComplaintUseCase — explicit, synchronous re-prioritization."""

from __future__ import annotations

import logging

from complaint_ai.application.ports.complaint_repo import ComplaintRepository
from complaint_ai.application.use_cases.prioritize_complaint import PrioritizeComplaintUseCase
from complaint_ai.domain.entities.priority_analysis import PriorityAnalysis
from complaint_ai.domain.errors import ComplaintNotFoundError

logger = logging.getLogger(__name__)


class ReprioritizeComplaintUseCase:
    def __init__(
        self,
        prioritize: PrioritizeComplaintUseCase,
        complaint_repo: ComplaintRepository,
    ):
        self._prioritize = prioritize
        self._complaints = complaint_repo

    async def execute(self, complaint_id: str) -> PriorityAnalysis:
        """Re-run prioritization for a stored complaint and attach the result.

        Raises:
            ComplaintNotFoundError: no complaint with *complaint_id*.
        Repository errors propagate unchanged.
        """
        snapshot = await self._complaints.get_snapshot(complaint_id)
        if snapshot is None:
            raise ComplaintNotFoundError(complaint_id)

        analysis = await self._prioritize.execute(snapshot)
        await self._complaints.attach_analysis(complaint_id, analysis)
        logger.info(
            "Complaint %s re-prioritized: priority=%s", complaint_id, analysis.priority.value
        )
        return analysis
