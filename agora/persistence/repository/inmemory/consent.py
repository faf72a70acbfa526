"""In-memory consent repository for testing."""

from typing import Optional

from agora.domain.error import TalkSessionAlreadyConsentedError
from agora.domain.model import TalkSessionConsent
from agora.domain.repository import TalkSessionConsentRepository
from agora.domain.value import TalkSessionId, UserId

from .base import InMemoryRepository


class InMemoryTalkSessionConsentRepository(
    InMemoryRepository[TalkSessionConsent], TalkSessionConsentRepository
):
    async def create(self, consent: TalkSessionConsent) -> TalkSessionConsent:
        key = (consent.talk_session_id, consent.user_id)
        if key in self._rows:
            raise TalkSessionAlreadyConsentedError(
                consent.talk_session_id, consent.user_id
            )
        return self._put(key, consent)

    async def find(
        self, talk_session_id: TalkSessionId, user_id: UserId
    ) -> Optional[TalkSessionConsent]:
        return self._get((talk_session_id, user_id))
