"""Action item ordering domain service."""

from typing import Optional

import logfire

from agora.domain.error import ActionItemNotFoundError
from agora.domain.model.action_item import ActionItem
from agora.domain.repository import ActionItemRepository
from agora.domain.value import ActionItemId

from .base import Service

# Distance between consecutive sequences after appending or renumbering
SEQUENCE_STRIDE = 1000


class ActionItemService(Service):
    """Assigns timeline positions to action items.

    Sequences within a session are unique and gap-tolerant. Appending
    leaves ``SEQUENCE_STRIDE`` free slots after the last item, and an
    insertion after a given item takes the midpoint between it and its
    successor. When two neighbours are adjacent the session's items are
    renumbered to the stride first.
    """

    def __init__(self, action_item_repository: ActionItemRepository) -> None:
        """Initialize action item service.

        Args:
            action_item_repository: Action item repository
        """
        self.action_item_repository = action_item_repository

    async def insert_action_item(
        self, parent_id: Optional[ActionItemId], action_item: ActionItem
    ) -> ActionItem:
        """Place and persist a new action item.

        Args:
            parent_id: Item to insert after; None appends at the end
            action_item: New item; its sequence is reassigned

        Returns:
            The stored item with its assigned sequence

        Raises:
            ActionItemNotFoundError: If the parent is not in the same session
        """
        with logfire.span(
            "insert_action_item",
            talk_session_id=str(action_item.talk_session_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            items = await self.action_item_repository.find_by_talk_session_id(
                action_item.talk_session_id
            )

            if parent_id is None:
                sequence = items[-1].sequence + SEQUENCE_STRIDE if items else 0
            else:
                sequence = await self._sequence_after(parent_id, items)

            action_item.sequence = sequence
            return await self.action_item_repository.create(action_item)

    async def _sequence_after(
        self, parent_id: ActionItemId, items: list[ActionItem]
    ) -> int:
        index = next((i for i, item in enumerate(items) if item.id == parent_id), None)
        if index is None:
            raise ActionItemNotFoundError(parent_id)

        if index == len(items) - 1:
            return items[index].sequence + SEQUENCE_STRIDE

        parent, successor = items[index], items[index + 1]
        if successor.sequence - parent.sequence > 1:
            return (parent.sequence + successor.sequence) // 2

        await self._renumber(items)
        return items[index].sequence + SEQUENCE_STRIDE // 2

    async def _renumber(self, items: list[ActionItem]) -> None:
        logfire.info(
            "Renumbering action items",
            talk_session_id=str(items[0].talk_session_id),
            count=len(items),
        )
        for position, item in enumerate(items):
            sequence = position * SEQUENCE_STRIDE
            if item.sequence != sequence:
                item.sequence = sequence
                await self.action_item_repository.update(item)
