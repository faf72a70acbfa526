"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import OpinionAlreadyVotedError
from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import OpinionId, TalkSessionId, UserId, VoteId, VoteType
from agora.persistence.database import violated_constraint
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            OpinionAlreadyVotedError: If uq_vote_opinion_user is violated
            IntegrityError: On any other constraint, such as an unknown user
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            if violated_constraint(e) != "uq_vote_opinion_user":
                raise
            logfire.warn(
                "Vote unique constraint violated",
                opinion_id=str(vote.opinion_id),
                user_id=str(vote.user_id),
            )
            raise OpinionAlreadyVotedError(vote.opinion_id, vote.user_id) from e
        return vote

    async def find_by_opinion_and_user(
        self, opinion_id: OpinionId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on an opinion."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.opinion_id == opinion_id,
                votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_opinion_id(self, opinion_id: OpinionId) -> List[Vote]:
        """Find every vote on an opinion."""
        stmt = select(votes_table).where(votes_table.c.opinion_id == opinion_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_participant_ids(self, talk_session_id: TalkSessionId) -> List[UserId]:
        """Distinct users that voted anywhere in a talk session."""
        stmt = (
            select(votes_table.c.user_id)
            .where(votes_table.c.talk_session_id == talk_session_id)
            .distinct()
        )
        result = await self.session.execute(stmt)
        return [UserId(row.user_id) for row in result.fetchall()]

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Correct the type of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
