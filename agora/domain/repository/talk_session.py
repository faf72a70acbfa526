"""TalkSession repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from agora.domain.model.talk_session import TalkSession
from agora.domain.value import TalkSessionId


class TalkSessionRepository(ABC):
    """Repository for TalkSession aggregate.

    Defines the contract for talk session persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, talk_session_id: TalkSessionId) -> Optional[TalkSession]:
        """Find a talk session by ID.

        Args:
            talk_session_id: The session's unique identifier

        Returns:
            The talk session if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, talk_session: TalkSession) -> TalkSession:
        """Insert a new talk session."""
        pass

    @abstractmethod
    async def update(self, talk_session: TalkSession) -> TalkSession:
        """Persist changes made through the aggregate's setters."""
        pass

    @abstractmethod
    async def find_unprocessed_ended(
        self, now: datetime, limit: int
    ) -> List[TalkSession]:
        """Find finished sessions whose end processing has not run yet.

        Args:
            now: Current time
            limit: Maximum number of sessions to return

        Returns:
            Sessions ordered by scheduled end time, oldest first
        """
        pass
