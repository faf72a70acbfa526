"""In-memory domain event store for testing."""

from typing import Any, Sequence

from agora.domain.model import DomainEvent
from agora.domain.repository import DomainEventRepository


class InMemoryDomainEventRepository(DomainEventRepository):
    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    async def append(self, events: Sequence[DomainEvent]) -> None:
        self.events.extend(events)

    def snapshot(self) -> Any:
        return list(self.events)

    def restore(self, state: Any) -> None:
        self.events = state
