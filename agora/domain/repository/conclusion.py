"""Conclusion repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.conclusion import Conclusion
from agora.domain.value import TalkSessionId


class ConclusionRepository(ABC):
    """Repository for talk session conclusions."""

    @abstractmethod
    async def create(self, conclusion: Conclusion) -> Conclusion:
        """Insert a conclusion.

        Raises:
            TalkSessionConclusionAlreadySetError: If the session has one
        """
        pass

    @abstractmethod
    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> Optional[Conclusion]:
        pass
