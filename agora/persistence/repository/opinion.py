"""PostgreSQL implementation of Opinion repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Opinion
from agora.domain.repository import OpinionRepository
from agora.domain.value import OpinionId, TalkSessionId
from agora.persistence.mappers import opinion_to_dict, row_to_opinion
from agora.persistence.tables import opinions_table


class PostgresOpinionRepository(OpinionRepository):
    """PostgreSQL implementation of OpinionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, opinion_id: OpinionId) -> Optional[Opinion]:
        """Find an opinion by ID."""
        stmt = select(opinions_table).where(opinions_table.c.id == opinion_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_opinion(row._asdict()) if row else None

    async def create(self, opinion: Opinion) -> Opinion:
        """Insert a new opinion."""
        stmt = insert(opinions_table).values(**opinion_to_dict(opinion))
        await self.session.execute(stmt)
        await self.session.flush()
        return opinion

    async def find_by_parent_id(self, parent_opinion_id: OpinionId) -> List[Opinion]:
        """Find direct replies to an opinion, oldest first."""
        stmt = (
            select(opinions_table)
            .where(opinions_table.c.parent_opinion_id == parent_opinion_id)
            .order_by(opinions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_opinion(row._asdict()) for row in result.fetchall()]

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> List[Opinion]:
        """Find every opinion in a talk session, oldest first."""
        stmt = (
            select(opinions_table)
            .where(opinions_table.c.talk_session_id == talk_session_id)
            .order_by(opinions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_opinion(row._asdict()) for row in result.fetchall()]
