"""In-memory report repository for testing."""

from typing import List

from agora.domain.model import Report
from agora.domain.repository import ReportRepository
from agora.domain.value import OpinionId, ReportId, ReportStatus

from .base import InMemoryRepository


class InMemoryReportRepository(InMemoryRepository[Report], ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    async def create(self, report: Report) -> Report:
        return self._put(report.id, report)

    async def find_by_opinion_id(self, opinion_id: OpinionId) -> List[Report]:
        reports = [r for r in self._all() if r.opinion_id == opinion_id]
        return sorted(reports, key=lambda r: r.created_at)

    async def update_status(self, report_id: ReportId, status: ReportStatus) -> None:
        report = self._rows.get(report_id)
        if report is not None:
            self._rows[report_id] = report.with_status(status)
