"""PostgreSQL implementation of ActionItem repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import ActionItem
from agora.domain.repository import ActionItemRepository
from agora.domain.value import ActionItemId, TalkSessionId
from agora.persistence.mappers import action_item_to_dict, row_to_action_item
from agora.persistence.tables import action_items_table


class PostgresActionItemRepository(ActionItemRepository):
    """PostgreSQL implementation of ActionItemRepository.

    The (talk_session_id, sequence) constraint is deferred, so renumbering
    may update rows one by one inside a transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, action_item: ActionItem) -> ActionItem:
        stmt = insert(action_items_table).values(**action_item_to_dict(action_item))
        await self.session.execute(stmt)
        await self.session.flush()
        return action_item

    async def update(self, action_item: ActionItem) -> ActionItem:
        stmt = (
            update(action_items_table)
            .where(action_items_table.c.id == action_item.id)
            .values(
                sequence=action_item.sequence,
                content=action_item.content,
                status=action_item.status.value,
                updated_at=action_item.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return action_item

    async def find_by_id(self, action_item_id: ActionItemId) -> Optional[ActionItem]:
        stmt = select(action_items_table).where(action_items_table.c.id == action_item_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_action_item(row._asdict()) if row else None

    async def find_by_talk_session_id(
        self, talk_session_id: TalkSessionId
    ) -> List[ActionItem]:
        stmt = (
            select(action_items_table)
            .where(action_items_table.c.talk_session_id == talk_session_id)
            .order_by(action_items_table.c.sequence)
        )
        result = await self.session.execute(stmt)
        return [row_to_action_item(row._asdict()) for row in result.fetchall()]

    async def find_latest(self, talk_session_id: TalkSessionId) -> Optional[ActionItem]:
        """Item with the highest sequence in the session."""
        stmt = (
            select(action_items_table)
            .where(action_items_table.c.talk_session_id == talk_session_id)
            .order_by(desc(action_items_table.c.sequence))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_action_item(row._asdict()) if row else None
