"""Talk session access control."""

import logfire

from agora.domain.error import (
    RestrictionNotSatisfiedError,
    TalkSessionNotFoundError,
    UserNotFoundError,
)
from agora.domain.model.restriction import (
    RestrictionAttribute,
    unsatisfied_restrictions,
)
from agora.domain.repository import TalkSessionRepository, UserRepository
from agora.domain.value import TalkSessionId, UserId

from .base import Service
from .talk_session_consent_service import TalkSessionConsentService


class TalkSessionAccessControl(Service):
    """Decides whether a user may take part in a talk session."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        user_repository: UserRepository,
        consent_service: TalkSessionConsentService,
    ) -> None:
        self.talk_session_repository = talk_session_repository
        self.user_repository = user_repository
        self.consent_service = consent_service

    async def can_user_join(
        self, talk_session_id: TalkSessionId, user_id: UserId
    ) -> None:
        """Ensure a user may write to a talk session.

        The owner always may. Anyone else must exist, meet every declared
        restriction and have consented to them.

        Args:
            talk_session_id: Talk session ID
            user_id: Acting user ID

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            UserNotFoundError: If the user does not exist
            RestrictionNotSatisfiedError: If a restriction or consent is missing
        """
        with logfire.span(
            "can_user_join", talk_session_id=str(talk_session_id), user_id=str(user_id)
        ):
            talk_session = await self.talk_session_repository.find_by_id(
                talk_session_id
            )
            if talk_session is None:
                raise TalkSessionNotFoundError(talk_session_id)

            if talk_session.is_owner(user_id):
                return

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            missing = unsatisfied_restrictions(user, talk_session.restrictions)
            if missing:
                keys = [attr.key.value for attr in missing]
                logfire.info(
                    "Restrictions not satisfied",
                    talk_session_id=str(talk_session_id),
                    user_id=str(user_id),
                    keys=keys,
                )
                raise RestrictionNotSatisfiedError(
                    f"このセッションでは、{','.join(keys)}が必要です。", keys=keys
                )

            if not await self.consent_service.has_consented(talk_session_id, user_id):
                raise RestrictionNotSatisfiedError(
                    "このセッションでは、参加するために同意が必要です。"
                )

    async def unsatisfied_restrictions(
        self, talk_session_id: TalkSessionId, user_id: UserId
    ) -> list[RestrictionAttribute]:
        """List the session restrictions a user does not meet yet.

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            UserNotFoundError: If the user does not exist
        """
        talk_session = await self.talk_session_repository.find_by_id(talk_session_id)
        if talk_session is None:
            raise TalkSessionNotFoundError(talk_session_id)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return unsatisfied_restrictions(user, talk_session.restrictions)
