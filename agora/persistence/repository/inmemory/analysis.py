"""In-memory analysis report repositories for testing."""

from typing import Optional

from agora.domain.model import AnalysisReport
from agora.domain.repository import (
    AnalysisReportRepository,
    DetachedAnalysisReportReader,
)
from agora.domain.value import AnalysisReportId, TalkSessionId

from .base import InMemoryRepository


class InMemoryAnalysisReportRepository(
    InMemoryRepository[AnalysisReport], AnalysisReportRepository
):
    async def find_by_id(self, report_id: AnalysisReportId) -> Optional[AnalysisReport]:
        return next((r for r in self._all() if r.id == report_id), None)

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[AnalysisReport]:
        return self._get(talk_session_id)

    async def save(self, report: AnalysisReport) -> AnalysisReport:
        return self._put(report.talk_session_id, report)


class InMemoryDetachedAnalysisReportReader(DetachedAnalysisReportReader):
    """Reads straight from an in-memory repository shared across scopes."""

    def __init__(self, repository: InMemoryAnalysisReportRepository) -> None:
        self.repository = repository

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[AnalysisReport]:
        return await self.repository.find_by_talk_session_id(talk_session_id)
