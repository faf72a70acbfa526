"""Domain event store interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from agora.domain.model.event import DomainEvent


class DomainEventRepository(ABC):
    """Append-only store for domain events."""

    @abstractmethod
    async def append(self, events: Sequence[DomainEvent]) -> None:
        pass
