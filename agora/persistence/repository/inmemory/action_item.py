"""In-memory action item repository for testing."""

from typing import List, Optional

from agora.domain.model import ActionItem
from agora.domain.repository import ActionItemRepository
from agora.domain.value import ActionItemId, TalkSessionId

from .base import InMemoryRepository


class InMemoryActionItemRepository(
    InMemoryRepository[ActionItem], ActionItemRepository
):
    """In-memory implementation of ActionItemRepository for testing.

    Sequence uniqueness is not checked per statement, like the deferred
    constraint on the real table.
    """

    async def create(self, action_item: ActionItem) -> ActionItem:
        return self._put(action_item.id, action_item)

    async def update(self, action_item: ActionItem) -> ActionItem:
        return self._put(action_item.id, action_item)

    async def find_by_id(self, action_item_id: ActionItemId) -> Optional[ActionItem]:
        return self._get(action_item_id)

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> List[ActionItem]:
        items = [a for a in self._all() if a.talk_session_id == talk_session_id]
        return sorted(items, key=lambda a: a.sequence)

    async def find_latest(self, talk_session_id: TalkSessionId) -> Optional[ActionItem]:
        items = await self.find_by_talk_session_id(talk_session_id)
        return items[-1] if items else None
