"""Take consent use case."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.error import TalkSessionNotFoundError, UserNotFoundError
from agora.domain.repository import (
    TalkSessionRepository,
    TransactionManager,
    UserRepository,
)
from agora.domain.service import TalkSessionConsentService
from agora.domain.value import TalkSessionId, UserId, parse_id


class TakeConsentRequest(BaseModel):
    talk_session_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class TakeConsentResponse(BaseModel):
    talk_session_id: str
    user_id: str
    restrictions: list[str]
    consented_at: datetime


class TakeConsentUseCase:
    """Records a user's consent to a session's current restrictions."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        user_repository: UserRepository,
        consent_service: TalkSessionConsentService,
        transaction_manager: TransactionManager,
    ) -> None:
        self.talk_session_repository = talk_session_repository
        self.user_repository = user_repository
        self.consent_service = consent_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: TakeConsentRequest) -> TakeConsentResponse:
        """Consent to the session as it is restricted right now.

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            UserNotFoundError: If the user is not registered
            TalkSessionAlreadyConsentedError: If consent is already in place
        """
        talk_session_id = TalkSessionId(
            parse_id(request.talk_session_id, "talk_session_id")
        )
        user_id = UserId(parse_id(request.user_id, "user_id"))

        talk_session = await self.talk_session_repository.find_by_id(talk_session_id)
        if talk_session is None:
            raise TalkSessionNotFoundError(talk_session_id)

        if await self.user_repository.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        async with self.transaction_manager.transaction():
            consent = await self.consent_service.take_consent(
                talk_session_id, user_id, list(talk_session.restrictions)
            )

        return TakeConsentResponse(
            talk_session_id=str(consent.talk_session_id),
            user_id=str(consent.user_id),
            restrictions=[key.value for key in consent.restrictions],
            consented_at=consent.consented_at,
        )
