"""PostgreSQL implementations of the analysis report repositories."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agora.domain.model import AnalysisReport
from agora.domain.repository import (
    AnalysisReportRepository,
    DetachedAnalysisReportReader,
)
from agora.domain.value import AnalysisReportId, TalkSessionId
from agora.persistence.database import get_session
from agora.persistence.mappers import analysis_report_to_dict, row_to_analysis_report
from agora.persistence.tables import analysis_reports_table


async def _find_by_talk_session_id(
    session: AsyncSession, talk_session_id: TalkSessionId
) -> Optional[AnalysisReport]:
    stmt = select(analysis_reports_table).where(
        analysis_reports_table.c.talk_session_id == talk_session_id
    )
    result = await session.execute(stmt)
    row = result.fetchone()
    return row_to_analysis_report(row._asdict()) if row else None


class PostgresAnalysisReportRepository(AnalysisReportRepository):
    """PostgreSQL implementation of AnalysisReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, report_id: AnalysisReportId) -> Optional[AnalysisReport]:
        stmt = select(analysis_reports_table).where(
            analysis_reports_table.c.id == report_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_analysis_report(row._asdict()) if row else None

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[AnalysisReport]:
        return await _find_by_talk_session_id(self.session, talk_session_id)

    async def save(self, report: AnalysisReport) -> AnalysisReport:
        """Upsert keyed on talk_session_id."""
        values = analysis_report_to_dict(report)
        stmt = insert(analysis_reports_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[analysis_reports_table.c.talk_session_id],
            set_={
                "report": values["report"],
                "feedbacks": values["feedbacks"],
                "updated_at": values["updated_at"],
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return report


class PostgresDetachedAnalysisReportReader(DetachedAnalysisReportReader):
    """Opens its own short-lived session for every read.

    Used by background work that runs after the request session is gone.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[AnalysisReport]:
        async with get_session(self.session_factory) as session:
            return await _find_by_talk_session_id(session, talk_session_id)
