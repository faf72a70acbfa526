"""PostgreSQL implementation of Report repository."""

from typing import List

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Report
from agora.domain.repository import ReportRepository
from agora.domain.value import OpinionId, ReportId, ReportStatus
from agora.persistence.mappers import report_to_dict, row_to_report
from agora.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, report: Report) -> Report:
        stmt = insert(reports_table).values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report

    async def find_by_opinion_id(self, opinion_id: OpinionId) -> List[Report]:
        """Find every report on an opinion, oldest first."""
        stmt = (
            select(reports_table)
            .where(reports_table.c.opinion_id == opinion_id)
            .order_by(reports_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def update_status(self, report_id: ReportId, status: ReportStatus) -> None:
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .values(status=status.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
