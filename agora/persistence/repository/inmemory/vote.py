"""In-memory vote repository for testing."""

from typing import List, Optional

from agora.domain.error import OpinionAlreadyVotedError
from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import OpinionId, TalkSessionId, UserId, VoteId, VoteType

from .base import InMemoryRepository


class InMemoryVoteRepository(InMemoryRepository[Vote], VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (opinion_id, user_id), mirroring the unique
    constraint of the real table.
    """

    async def create(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            OpinionAlreadyVotedError: If the user already voted on the opinion
        """
        key = (vote.opinion_id, vote.user_id)
        if key in self._rows:
            raise OpinionAlreadyVotedError(vote.opinion_id, vote.user_id)
        return self._put(key, vote)

    async def find_by_opinion_and_user(
        self, opinion_id: OpinionId, user_id: UserId
    ) -> Optional[Vote]:
        return self._get((opinion_id, user_id))

    async def find_by_opinion_id(self, opinion_id: OpinionId) -> List[Vote]:
        return [v for v in self._all() if v.opinion_id == opinion_id]

    async def find_participant_ids(self, talk_session_id: TalkSessionId) -> List[UserId]:
        seen: dict[UserId, None] = {}
        for vote in self._all():
            if vote.talk_session_id == talk_session_id:
                seen.setdefault(vote.user_id)
        return list(seen)

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        for key, vote in self._rows.items():
            if vote.id == vote_id:
                self._rows[key] = vote.change_vote_type(vote_type)
                return
