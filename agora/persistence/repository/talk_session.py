"""PostgreSQL implementation of TalkSession repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import TalkSession
from agora.domain.repository import TalkSessionRepository
from agora.domain.value import TalkSessionId
from agora.persistence.mappers import row_to_talk_session, talk_session_to_dict
from agora.persistence.tables import talk_sessions_table


class PostgresTalkSessionRepository(TalkSessionRepository):
    """PostgreSQL implementation of TalkSessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, talk_session_id: TalkSessionId) -> Optional[TalkSession]:
        """Find a talk session by ID."""
        with logfire.span(
            "talk_session_repository.find_by_id", talk_session_id=str(talk_session_id)
        ):
            stmt = select(talk_sessions_table).where(
                talk_sessions_table.c.id == talk_session_id
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Talk session not found", talk_session_id=str(talk_session_id))
                return None

            return row_to_talk_session(row._asdict())

    async def create(self, talk_session: TalkSession) -> TalkSession:
        """Insert a new talk session."""
        stmt = insert(talk_sessions_table).values(**talk_session_to_dict(talk_session))
        await self.session.execute(stmt)
        await self.session.flush()
        return talk_session

    async def update(self, talk_session: TalkSession) -> TalkSession:
        """Persist every mutable column of the session."""
        values = talk_session_to_dict(talk_session)
        for column in ("id", "owner_id", "created_at"):
            values.pop(column)

        stmt = (
            update(talk_sessions_table)
            .where(talk_sessions_table.c.id == talk_session.id)
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return talk_session

    async def find_unprocessed_ended(
        self, now: datetime, limit: int
    ) -> List[TalkSession]:
        """Find finished sessions whose end processing has not run yet."""
        stmt = (
            select(talk_sessions_table)
            .where(
                talk_sessions_table.c.scheduled_end_time < now,
                talk_sessions_table.c.end_processed.is_(False),
            )
            .order_by(talk_sessions_table.c.scheduled_end_time)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_talk_session(row._asdict()) for row in result.fetchall()]
