"""Opinion domain service."""

import logfire

from agora.domain.model.opinion import Opinion
from agora.domain.repository import OpinionRepository, VoteRepository
from agora.domain.value import OpinionId, UserId

from .base import Service


class OpinionService(Service):
    """Domain service for opinion reads that involve votes."""

    def __init__(
        self, opinion_repository: OpinionRepository, vote_repository: VoteRepository
    ) -> None:
        """Initialize opinion service.

        Args:
            opinion_repository: Opinion repository
            vote_repository: Vote repository
        """
        self.opinion_repository = opinion_repository
        self.vote_repository = vote_repository

    async def is_voted(self, opinion_id: OpinionId, user_id: UserId) -> bool:
        """Check whether a user already voted on an opinion."""
        vote = await self.vote_repository.find_by_opinion_and_user(opinion_id, user_id)
        return vote is not None

    async def get_with_replies(
        self, opinion_id: OpinionId, viewer_id: UserId | None = None
    ) -> Opinion | None:
        """Load an opinion with its direct replies attached.

        When ``viewer_id`` is given, each opinion carries the viewer's vote.

        Args:
            opinion_id: Opinion ID
            viewer_id: Optional user whose votes are projected

        Returns:
            The opinion with replies, or None if it does not exist
        """
        with logfire.span("get_opinion_with_replies", opinion_id=str(opinion_id)):
            opinion = await self.opinion_repository.find_by_id(opinion_id)
            if opinion is None:
                return None

            for reply in await self.opinion_repository.find_by_parent_id(opinion_id):
                opinion.reply(reply)

            if viewer_id is not None:
                for target in (opinion, *opinion.replies):
                    vote = await self.vote_repository.find_by_opinion_and_user(
                        target.id, viewer_id
                    )
                    if vote is not None:
                        target.apply_vote(vote.vote_type)

            return opinion
