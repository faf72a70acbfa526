"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.user import User
from agora.domain.value import UserId


class UserRepository(ABC):
    """Read access to users, plus save for provisioning."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user."""
        pass
