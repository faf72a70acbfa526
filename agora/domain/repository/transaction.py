"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Binds repository calls of one request to a single transaction.

    ``transaction()`` commits on normal exit and rolls back when the block
    raises. Entering it while a transaction is already open reuses the
    outer one, so nested calls commit or roll back with their caller.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        pass

    @property
    @abstractmethod
    def in_transaction(self) -> bool:
        pass
