"""In-memory conclusion repository for testing."""

from typing import Optional

from agora.domain.error import TalkSessionConclusionAlreadySetError
from agora.domain.model import Conclusion
from agora.domain.repository import ConclusionRepository
from agora.domain.value import TalkSessionId

from .base import InMemoryRepository


class InMemoryConclusionRepository(
    InMemoryRepository[Conclusion], ConclusionRepository
):
    async def create(self, conclusion: Conclusion) -> Conclusion:
        if conclusion.talk_session_id in self._rows:
            raise TalkSessionConclusionAlreadySetError(conclusion.talk_session_id)
        return self._put(conclusion.talk_session_id, conclusion)

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[Conclusion]:
        return self._get(talk_session_id)
