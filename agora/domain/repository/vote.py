"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.vote import Vote
from agora.domain.value import OpinionId, TalkSessionId, UserId, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Implementations must enforce one vote per (opinion, user) at the
    storage layer.
    """

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            OpinionAlreadyVotedError: If the user already voted on the opinion
        """
        pass

    @abstractmethod
    async def find_by_opinion_and_user(
        self, opinion_id: OpinionId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on an opinion.

        Args:
            opinion_id: The opinion's ID
            user_id: The voter's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_opinion_id(self, opinion_id: OpinionId) -> List[Vote]:
        """Find every vote on an opinion."""
        pass

    @abstractmethod
    async def find_participant_ids(self, talk_session_id: TalkSessionId) -> List[UserId]:
        """Distinct users that voted anywhere in a talk session."""
        pass

    @abstractmethod
    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Correct the type of an existing vote."""
        pass
