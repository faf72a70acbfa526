"""In-memory user repository for testing."""

from typing import Optional

from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId

from .base import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    """In-memory implementation of UserRepository for testing."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._get(user_id)

    async def save(self, user: User) -> User:
        return self._put(user.id, user)
