"""Add conclusion use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.error import (
    TalkSessionConclusionAlreadySetError,
    TalkSessionNotFinishedError,
    TalkSessionNotFoundError,
    TalkSessionNotOwnerError,
)
from agora.domain.model.conclusion import Conclusion
from agora.domain.repository import (
    ConclusionRepository,
    TalkSessionRepository,
    TransactionManager,
)
from agora.domain.value import TalkSessionId, UserId, parse_id


class AddConclusionRequest(BaseModel):
    """Add conclusion request."""

    talk_session_id: str  # UUID string
    user_id: str  # Owner ID from authenticated user
    content: str


class AddConclusionResponse(BaseModel):
    """Add conclusion response."""

    talk_session_id: str
    content: str
    created_by: str
    created_at: datetime


class AddConclusionUseCase:
    """Use case for the owner closing a finished session with a summary."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        conclusion_repository: ConclusionRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self.talk_session_repository = talk_session_repository
        self.conclusion_repository = conclusion_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: AddConclusionRequest) -> AddConclusionResponse:
        """Execute add conclusion flow.

        Args:
            request: Add conclusion request

        Returns:
            Stored conclusion

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            TalkSessionNotOwnerError: If the caller is not the owner
            TalkSessionNotFinishedError: If the session is still running
            TalkSessionConclusionAlreadySetError: If a conclusion exists
            ConclusionContentError: If the content is empty or too long
        """
        talk_session_id = TalkSessionId(
            parse_id(request.talk_session_id, "talk_session_id")
        )
        user_id = UserId(parse_id(request.user_id, "user_id"))

        with logfire.span("add_conclusion", talk_session_id=str(talk_session_id)):
            talk_session = await self.talk_session_repository.find_by_id(
                talk_session_id
            )
            if talk_session is None:
                raise TalkSessionNotFoundError(talk_session_id)
            if not talk_session.is_owner(user_id):
                raise TalkSessionNotOwnerError(talk_session_id, user_id)

            now = self.clock.now()
            if not talk_session.is_finished(now):
                raise TalkSessionNotFinishedError(talk_session_id)

            existing = await self.conclusion_repository.find_by_talk_session_id(
                talk_session_id
            )
            if existing is not None:
                raise TalkSessionConclusionAlreadySetError(talk_session_id)

            conclusion = Conclusion(
                talk_session_id=talk_session_id,
                content=request.content,
                created_by=user_id,
                created_at=now,
            )

            async with self.transaction_manager.transaction():
                conclusion = await self.conclusion_repository.create(conclusion)

            logfire.info("Conclusion added", talk_session_id=str(talk_session_id))

            return AddConclusionResponse(
                talk_session_id=str(conclusion.talk_session_id),
                content=conclusion.content,
                created_by=str(conclusion.created_by),
                created_at=conclusion.created_at,
            )
