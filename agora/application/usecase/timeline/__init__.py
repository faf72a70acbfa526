"""Timeline use cases."""

from .add_action_item import (
    ActionItemResponse,
    AddActionItemRequest,
    AddActionItemUseCase,
)
from .edit_action_item import EditActionItemRequest, EditActionItemUseCase

__all__ = [
    "ActionItemResponse",
    "AddActionItemRequest",
    "AddActionItemUseCase",
    "EditActionItemRequest",
    "EditActionItemUseCase",
]
