"""Add action item use case."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.model.action_item import ActionItem
from agora.domain.repository import TalkSessionRepository, TransactionManager
from agora.domain.service import ActionItemService
from agora.domain.value import (
    ActionItemId,
    ActionStatus,
    TalkSessionId,
    UserId,
    parse_id,
)

from ._access import load_finished_owned_session


class AddActionItemRequest(BaseModel):
    """Add action item request."""

    talk_session_id: str  # UUID string
    owner_id: str  # Owner ID from authenticated user
    parent_action_item_id: Optional[str] = None  # Insert after this item
    content: str
    status: str  # Japanese status label, e.g. "未着手"


class ActionItemResponse(BaseModel):
    """Timeline action item."""

    action_item_id: str
    talk_session_id: str
    sequence: int
    content: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, action_item: ActionItem) -> "ActionItemResponse":
        return cls(
            action_item_id=str(action_item.id),
            talk_session_id=str(action_item.talk_session_id),
            sequence=action_item.sequence,
            content=action_item.content,
            status=action_item.status.value,
            created_at=action_item.created_at,
            updated_at=action_item.updated_at,
        )


class AddActionItemUseCase:
    """Use case for adding an entry to a finished session's timeline."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        action_item_service: ActionItemService,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize add action item use case.

        Args:
            talk_session_repository: Talk session repository
            action_item_service: Sequencing policy
            transaction_manager: Unit of work
            clock: Time source
        """
        self.talk_session_repository = talk_session_repository
        self.action_item_service = action_item_service
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: AddActionItemRequest) -> ActionItemResponse:
        """Execute add action item flow.

        Args:
            request: Add action item request

        Returns:
            Stored action item with its assigned sequence

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            TalkSessionNotFinishedError: If the session is still running
            TalkSessionNotOwnerError: If the caller is not the owner
            InvalidActionStatusError: If the status label is unknown
            ActionItemContentError: If the content is empty or too long
            ActionItemNotFoundError: If the parent is not in the session
        """
        talk_session_id = TalkSessionId(
            parse_id(request.talk_session_id, "talk_session_id")
        )
        owner_id = UserId(parse_id(request.owner_id, "owner_id"))
        parent_id = (
            ActionItemId(
                parse_id(request.parent_action_item_id, "parent_action_item_id")
            )
            if request.parent_action_item_id
            else None
        )

        with logfire.span("add_action_item", talk_session_id=str(talk_session_id)):
            now = self.clock.now()
            await load_finished_owned_session(
                self.talk_session_repository, talk_session_id, owner_id, now
            )

            action_item = ActionItem(
                id=ActionItemId(uuid4()),
                talk_session_id=talk_session_id,
                sequence=0,  # Assigned by the service
                content=request.content,
                status=ActionStatus.parse(request.status),
                created_at=now,
                updated_at=now,
            )

            async with self.transaction_manager.transaction():
                action_item = await self.action_item_service.insert_action_item(
                    parent_id, action_item
                )

            logfire.info(
                "Action item added",
                action_item_id=str(action_item.id),
                sequence=action_item.sequence,
            )

            return ActionItemResponse.from_model(action_item)
