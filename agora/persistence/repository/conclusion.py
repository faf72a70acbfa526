"""PostgreSQL implementation of Conclusion repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import TalkSessionConclusionAlreadySetError
from agora.domain.model import Conclusion
from agora.domain.repository import ConclusionRepository
from agora.domain.value import TalkSessionId
from agora.persistence.database import violated_constraint
from agora.persistence.mappers import conclusion_to_dict, row_to_conclusion
from agora.persistence.tables import conclusions_table


class PostgresConclusionRepository(ConclusionRepository):
    """PostgreSQL implementation of ConclusionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, conclusion: Conclusion) -> Conclusion:
        stmt = insert(conclusions_table).values(**conclusion_to_dict(conclusion))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            if violated_constraint(e) != "pk_talk_session_conclusion":
                raise
            raise TalkSessionConclusionAlreadySetError(conclusion.talk_session_id) from e
        return conclusion

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[Conclusion]:
        stmt = select(conclusions_table).where(
            conclusions_table.c.talk_session_id == talk_session_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_conclusion(row._asdict()) if row else None
