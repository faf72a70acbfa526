"""In-memory opinion repository for testing."""

from typing import List, Optional

from agora.domain.model import Opinion
from agora.domain.repository import OpinionRepository
from agora.domain.value import OpinionId, TalkSessionId

from .base import InMemoryRepository


class InMemoryOpinionRepository(InMemoryRepository[Opinion], OpinionRepository):
    """In-memory implementation of OpinionRepository for testing."""

    async def find_by_id(self, opinion_id: OpinionId) -> Optional[Opinion]:
        return self._get(opinion_id)

    async def create(self, opinion: Opinion) -> Opinion:
        return self._put(opinion.id, opinion)

    async def find_by_parent_id(self, parent_opinion_id: OpinionId) -> List[Opinion]:
        replies = [o for o in self._all() if o.parent_opinion_id == parent_opinion_id]
        return sorted(replies, key=lambda o: o.created_at)

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> List[Opinion]:
        opinions = [o for o in self._all() if o.talk_session_id == talk_session_id]
        return sorted(opinions, key=lambda o: o.created_at)
