"""BackgroundPrioritizer — fire-and-forget prioritization after complaint creation."""

from __future__ import annotations

import asyncio
import logging

from complaint_ai.application.ports.complaint_repo import ComplaintRepository
from complaint_ai.application.use_cases.prioritize_complaint import PrioritizeComplaintUseCase
from complaint_ai.domain.entities.complaint import ComplaintSnapshot

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.1


class BackgroundPrioritizer:
    """Schedules one prioritization per complaint on the running event loop.

    At-most-once, best-effort: each scheduled job runs once after *delay*
    seconds. If prioritization or the record update fails, the error is
    logged and dropped and the complaint keeps its prior priority.
    """

    def __init__(
        self,
        prioritize: PrioritizeComplaintUseCase,
        complaint_repo: ComplaintRepository,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
    ):
        self._prioritize = prioritize
        self._complaints = complaint_repo
        self._delay = delay_seconds
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, complaint_id: str, snapshot: ComplaintSnapshot) -> asyncio.Task:
        """Start a background job. Must be called from within a running loop."""
        task = asyncio.get_running_loop().create_task(
            self._run(complaint_id, snapshot),
            name=f"prioritize-{complaint_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for all outstanding jobs to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(self, complaint_id: str, snapshot: ComplaintSnapshot) -> None:
        try:
            if self._delay > 0:
                await asyncio.sleep(self._delay)
            analysis = await self._prioritize.execute(snapshot)
            await self._complaints.attach_analysis(complaint_id, analysis)
            logger.info(
                "Complaint %s updated with priority=%s", complaint_id, analysis.priority.value
            )
        except Exception:
            logger.exception("AI prioritization failed for complaint %s", complaint_id)
