"""Analysis report repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.analysis import AnalysisReport
from agora.domain.value import AnalysisReportId, TalkSessionId


class AnalysisReportRepository(ABC):
    """Repository for analysis reports written by the analysis service."""

    @abstractmethod
    async def find_by_id(self, report_id: AnalysisReportId) -> Optional[AnalysisReport]:
        pass

    @abstractmethod
    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[AnalysisReport]:
        """Find the latest report for a session."""
        pass

    @abstractmethod
    async def save(self, report: AnalysisReport) -> AnalysisReport:
        """Insert or replace a report (including feedback)."""
        pass


class DetachedAnalysisReportReader(ABC):
    """Reads analysis reports without a request-scoped session.

    Background work that outlives the request uses this instead of the
    request's repository, whose session is closed once the response is sent.
    """

    @abstractmethod
    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[AnalysisReport]:
        pass
