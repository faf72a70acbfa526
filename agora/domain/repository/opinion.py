"""Opinion repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.opinion import Opinion
from agora.domain.value import OpinionId, TalkSessionId


class OpinionRepository(ABC):
    """Repository for Opinion aggregate."""

    @abstractmethod
    async def find_by_id(self, opinion_id: OpinionId) -> Optional[Opinion]:
        """Find an opinion by ID.

        Args:
            opinion_id: The opinion's unique identifier

        Returns:
            The opinion if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, opinion: Opinion) -> Opinion:
        """Insert a new opinion."""
        pass

    @abstractmethod
    async def find_by_parent_id(self, parent_opinion_id: OpinionId) -> List[Opinion]:
        """Find direct replies to an opinion, oldest first."""
        pass

    @abstractmethod
    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> List[Opinion]:
        """Find every opinion in a talk session, oldest first."""
        pass
