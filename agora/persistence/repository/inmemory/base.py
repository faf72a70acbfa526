"""Shared state handling for in-memory repositories."""

from copy import deepcopy
from typing import Any, Generic, Hashable, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class InMemoryRepository(Generic[ModelT]):
    """Keeps models in a dict and hands out copies.

    Callers may mutate what they get back without touching stored state,
    matching how rows behave in a real database.
    """

    def __init__(self) -> None:
        self._rows: dict[Hashable, ModelT] = {}

    def _put(self, key: Hashable, model: ModelT) -> ModelT:
        self._rows[key] = model.model_copy(deep=True)
        return model

    def _get(self, key: Hashable) -> ModelT | None:
        model = self._rows.get(key)
        return model.model_copy(deep=True) if model is not None else None

    def _all(self) -> list[ModelT]:
        return [model.model_copy(deep=True) for model in self._rows.values()]

    def snapshot(self) -> Any:
        return deepcopy(self._rows)

    def restore(self, state: Any) -> None:
        self._rows = state
