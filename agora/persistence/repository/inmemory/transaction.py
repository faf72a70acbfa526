"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Protocol, Sequence

from agora.domain.repository import TransactionManager


class Snapshottable(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryTransactionManager(TransactionManager):
    """Restores every registered repository when a transaction fails.

    Only the outermost ``transaction()`` takes a snapshot; nested blocks
    join it.
    """

    def __init__(self, repositories: Sequence[Snapshottable]) -> None:
        self.repositories = list(repositories)
        self._depth = 0
        self.commits = 0
        self.rollbacks = 0

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        self._depth += 1
        if self._depth > 1:
            try:
                yield
            finally:
                self._depth -= 1
            return

        states = [repo.snapshot() for repo in self.repositories]
        try:
            yield
        except BaseException:
            for repo, state in zip(self.repositories, states):
                repo.restore(state)
            self.rollbacks += 1
            raise
        else:
            self.commits += 1
        finally:
            self._depth = 0
