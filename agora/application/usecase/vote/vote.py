"""Vote use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from agora.application.analysis_trigger import AnalysisTrigger
from agora.domain.clock import Clock
from agora.domain.error import (
    OpinionAlreadyVotedError,
    OpinionNotFoundError,
    TalkSessionIsFinishedError,
    TalkSessionNotFoundError,
)
from agora.domain.model.vote import Vote
from agora.domain.repository import (
    OpinionRepository,
    TalkSessionRepository,
    TransactionManager,
    VoteRepository,
)
from agora.domain.service import OpinionService, TalkSessionAccessControl
from agora.domain.value import OpinionId, UserId, VoteType, parse_id


class VoteRequest(BaseModel):
    """Vote request."""

    opinion_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: str  # "agree" | "disagree" | "pass"


class VoteResponse(BaseModel):
    """Vote response."""

    vote_id: str
    opinion_id: str
    talk_session_id: str
    vote_type: str
    created_at: datetime


class VoteUseCase:
    """Use case for casting a vote on an opinion."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        vote_repository: VoteRepository,
        opinion_service: OpinionService,
        access_control: TalkSessionAccessControl,
        transaction_manager: TransactionManager,
        analysis_trigger: AnalysisTrigger,
        clock: Clock,
    ) -> None:
        """Initialize vote use case.

        Args:
            opinion_repository: Opinion repository
            talk_session_repository: Talk session repository
            vote_repository: Vote repository
            opinion_service: Opinion domain service
            access_control: Talk session access control
            transaction_manager: Unit of work
            analysis_trigger: Post-commit analysis dispatcher
            clock: Time source
        """
        self.opinion_repository = opinion_repository
        self.talk_session_repository = talk_session_repository
        self.vote_repository = vote_repository
        self.opinion_service = opinion_service
        self.access_control = access_control
        self.transaction_manager = transaction_manager
        self.analysis_trigger = analysis_trigger
        self.clock = clock

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Steps:
        1. Load the opinion and its talk session
        2. Reject votes on finished sessions
        3. Check the voter may take part in the session
        4. Reject a second vote by the same user
        5. Store the vote in a transaction
        6. After commit, dispatch analysis without waiting for it

        Args:
            request: Vote request

        Returns:
            Vote response with vote details

        Raises:
            InvalidVoteTypeError: If the vote type is not agree/disagree/pass
            OpinionNotFoundError: If the opinion does not exist
            TalkSessionNotFoundError: If the opinion's session does not exist
            TalkSessionIsFinishedError: If the session has finished
            RestrictionNotSatisfiedError: If the voter may not take part
            OpinionAlreadyVotedError: If the user already voted on the opinion
        """
        opinion_id = OpinionId(parse_id(request.opinion_id, "opinion_id"))
        user_id = UserId(parse_id(request.user_id, "user_id"))
        vote_type = VoteType.parse(request.vote_type)

        with logfire.span("vote", opinion_id=str(opinion_id), user_id=str(user_id)):
            opinion = await self.opinion_repository.find_by_id(opinion_id)
            if opinion is None:
                raise OpinionNotFoundError(opinion_id)

            talk_session = await self.talk_session_repository.find_by_id(
                opinion.talk_session_id
            )
            if talk_session is None:
                raise TalkSessionNotFoundError(opinion.talk_session_id)

            now = self.clock.now()
            if talk_session.is_finished(now):
                raise TalkSessionIsFinishedError(talk_session.id)

            await self.access_control.can_user_join(talk_session.id, user_id)

            if await self.opinion_service.is_voted(opinion_id, user_id):
                logfire.warn(
                    "Duplicate vote attempt",
                    opinion_id=str(opinion_id),
                    user_id=str(user_id),
                )
                raise OpinionAlreadyVotedError(opinion_id, user_id)

            async with self.transaction_manager.transaction():
                vote = await self.vote_repository.create(
                    Vote.cast(
                        opinion_id=opinion_id,
                        talk_session_id=talk_session.id,
                        user_id=user_id,
                        vote_type=vote_type,
                        now=now,
                    )
                )

            logfire.info(
                "Vote cast",
                opinion_id=str(opinion_id),
                user_id=str(user_id),
                vote_type=vote_type.label,
            )

            self.analysis_trigger.dispatch(talk_session.id)

            return VoteResponse(
                vote_id=str(vote.id),
                opinion_id=str(vote.opinion_id),
                talk_session_id=str(vote.talk_session_id),
                vote_type=vote.vote_type.label,
                created_at=vote.created_at,
            )
