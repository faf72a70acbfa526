"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List

from agora.domain.model.report import Report
from agora.domain.value import OpinionId, ReportId, ReportStatus


class ReportRepository(ABC):
    """Repository for opinion reports."""

    @abstractmethod
    async def create(self, report: Report) -> Report:
        """Insert a report. Repeated reports by one user are allowed."""
        pass

    @abstractmethod
    async def find_by_opinion_id(self, opinion_id: OpinionId) -> List[Report]:
        """Find every report filed against an opinion, oldest first."""
        pass

    @abstractmethod
    async def update_status(self, report_id: ReportId, status: ReportStatus) -> None:
        """Set the status of one report."""
        pass
