"""In-memory talk session repository for testing."""

from datetime import datetime
from typing import List, Optional

from agora.domain.model import TalkSession
from agora.domain.repository import TalkSessionRepository
from agora.domain.value import TalkSessionId

from .base import InMemoryRepository


class InMemoryTalkSessionRepository(
    InMemoryRepository[TalkSession], TalkSessionRepository
):
    """In-memory implementation of TalkSessionRepository for testing."""

    async def find_by_id(self, talk_session_id: TalkSessionId) -> Optional[TalkSession]:
        return self._get(talk_session_id)

    async def create(self, talk_session: TalkSession) -> TalkSession:
        return self._put(talk_session.id, talk_session)

    async def update(self, talk_session: TalkSession) -> TalkSession:
        return self._put(talk_session.id, talk_session)

    async def find_unprocessed_ended(
        self, now: datetime, limit: int
    ) -> List[TalkSession]:
        ended = [
            s for s in self._all() if s.is_finished(now) and not s.end_processed
        ]
        ended.sort(key=lambda s: s.scheduled_end_time)
        return ended[:limit]
