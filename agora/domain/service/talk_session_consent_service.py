"""Talk session consent domain service."""

import logfire

from agora.domain.clock import Clock
from agora.domain.error import (
    TalkSessionAlreadyConsentedError,
    TalkSessionNotFoundError,
)
from agora.domain.model.consent import TalkSessionConsent
from agora.domain.repository import (
    TalkSessionConsentRepository,
    TalkSessionRepository,
)
from agora.domain.value import RestrictionAttributeKey, TalkSessionId, UserId

from .base import Service


class TalkSessionConsentService(Service):
    """Records and checks participants' consent to session restrictions."""

    def __init__(
        self,
        consent_repository: TalkSessionConsentRepository,
        talk_session_repository: TalkSessionRepository,
        clock: Clock,
    ) -> None:
        """Initialize consent service.

        Args:
            consent_repository: Consent repository
            talk_session_repository: Talk session repository
            clock: Time source
        """
        self.consent_repository = consent_repository
        self.talk_session_repository = talk_session_repository
        self.clock = clock

    async def take_consent(
        self,
        talk_session_id: TalkSessionId,
        user_id: UserId,
        restrictions: list[RestrictionAttributeKey],
    ) -> TalkSessionConsent:
        """Record that a user accepts a session's restrictions.

        Args:
            talk_session_id: Talk session ID
            user_id: Consenting user ID
            restrictions: Restriction keys the user acknowledged

        Returns:
            Stored consent

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            TalkSessionAlreadyConsentedError: If consent is already in place,
                including sessions without restrictions
        """
        with logfire.span(
            "take_consent", talk_session_id=str(talk_session_id), user_id=str(user_id)
        ):
            if await self.has_consented(talk_session_id, user_id):
                logfire.warn(
                    "Duplicate consent attempt",
                    talk_session_id=str(talk_session_id),
                    user_id=str(user_id),
                )
                raise TalkSessionAlreadyConsentedError(talk_session_id, user_id)

            consent = TalkSessionConsent(
                talk_session_id=talk_session_id,
                user_id=user_id,
                consented_at=self.clock.now(),
                restrictions=restrictions,
            )
            # The unique constraint raises the same error under a race
            return await self.consent_repository.create(consent)

    async def has_consented(
        self, talk_session_id: TalkSessionId, user_id: UserId
    ) -> bool:
        """Check whether a user may act under a session's restrictions.

        Sessions without restrictions need no consent, so every user counts
        as consented. Otherwise a stored consent row must exist.

        Raises:
            TalkSessionNotFoundError: If the session does not exist
        """
        talk_session = await self.talk_session_repository.find_by_id(talk_session_id)
        if talk_session is None:
            raise TalkSessionNotFoundError(talk_session_id)

        if not talk_session.has_restrictions:
            return True

        consent = await self.consent_repository.find(talk_session_id, user_id)
        return consent is not None
