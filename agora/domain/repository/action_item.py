"""ActionItem repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.action_item import ActionItem
from agora.domain.value import ActionItemId, TalkSessionId


class ActionItemRepository(ABC):
    """Repository for timeline action items."""

    @abstractmethod
    async def create(self, action_item: ActionItem) -> ActionItem:
        """Insert an action item. Sequences are unique within a session."""
        pass

    @abstractmethod
    async def update(self, action_item: ActionItem) -> ActionItem:
        """Persist content, status and sequence changes."""
        pass

    @abstractmethod
    async def find_by_id(self, action_item_id: ActionItemId) -> Optional[ActionItem]:
        pass

    @abstractmethod
    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> List[ActionItem]:
        """Find a session's action items ordered by sequence."""
        pass

    @abstractmethod
    async def find_latest(self, talk_session_id: TalkSessionId) -> Optional[ActionItem]:
        """Find the action item with the highest sequence in a session."""
        pass
