"""TalkSessionConsent repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.consent import TalkSessionConsent
from agora.domain.value import TalkSessionId, UserId


class TalkSessionConsentRepository(ABC):
    """Repository for talk session consents."""

    @abstractmethod
    async def create(self, consent: TalkSessionConsent) -> TalkSessionConsent:
        """Insert a consent.

        Raises:
            TalkSessionAlreadyConsentedError: If the user already consented
        """
        pass

    @abstractmethod
    async def find(
        self, talk_session_id: TalkSessionId, user_id: UserId
    ) -> Optional[TalkSessionConsent]:
        """Find a user's consent for a session, or None if absent."""
        pass
