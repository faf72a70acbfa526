"""PostgreSQL implementation of the domain event store."""

from typing import Sequence

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import DomainEvent
from agora.domain.repository import DomainEventRepository
from agora.persistence.mappers import domain_event_to_dict
from agora.persistence.tables import domain_events_table


class PostgresDomainEventRepository(DomainEventRepository):
    """Appends events to the domain_events table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, events: Sequence[DomainEvent]) -> None:
        if not events:
            return
        stmt = insert(domain_events_table).values(
            [domain_event_to_dict(event) for event in events]
        )
        await self.session.execute(stmt)
        await self.session.flush()
