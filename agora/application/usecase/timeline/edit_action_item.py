"""Edit action item use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.error import ActionItemNotFoundError
from agora.domain.repository import (
    ActionItemRepository,
    TalkSessionRepository,
    TransactionManager,
)
from agora.domain.value import (
    ActionItemId,
    ActionStatus,
    TalkSessionId,
    UserId,
    parse_id,
)

from ._access import load_finished_owned_session
from .add_action_item import ActionItemResponse


class EditActionItemRequest(BaseModel):
    """Edit action item request. Fields left as None are not changed."""

    talk_session_id: str  # UUID string
    owner_id: str  # Owner ID from authenticated user
    action_item_id: str  # UUID string
    content: Optional[str] = None
    status: Optional[str] = None


class EditActionItemUseCase:
    """Use case for changing an existing timeline entry."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        action_item_repository: ActionItemRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self.talk_session_repository = talk_session_repository
        self.action_item_repository = action_item_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: EditActionItemRequest) -> ActionItemResponse:
        """Update content and status of an action item.

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            TalkSessionNotFinishedError: If the session is still running
            TalkSessionNotOwnerError: If the caller is not the owner
            ActionItemNotFoundError: If the item is not in the session
            InvalidActionStatusError: If the status label is unknown
            ActionItemContentError: If the content is empty or too long
        """
        talk_session_id = TalkSessionId(
            parse_id(request.talk_session_id, "talk_session_id")
        )
        owner_id = UserId(parse_id(request.owner_id, "owner_id"))
        action_item_id = ActionItemId(
            parse_id(request.action_item_id, "action_item_id")
        )

        with logfire.span("edit_action_item", action_item_id=str(action_item_id)):
            now = self.clock.now()
            await load_finished_owned_session(
                self.talk_session_repository, talk_session_id, owner_id, now
            )

            action_item = await self.action_item_repository.find_by_id(action_item_id)
            if action_item is None or action_item.talk_session_id != talk_session_id:
                raise ActionItemNotFoundError(action_item_id)

            if request.content is not None:
                action_item.update_content(request.content, now)
            if request.status is not None:
                action_item.update_status(ActionStatus.parse(request.status), now)

            async with self.transaction_manager.transaction():
                action_item = await self.action_item_repository.update(action_item)

            return ActionItemResponse.from_model(action_item)
