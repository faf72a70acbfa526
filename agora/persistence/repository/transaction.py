"""SQLAlchemy-backed unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Commits or rolls back the request's session.

    Repositories of one request share the same ``AsyncSession``, so every
    statement issued inside ``transaction()`` belongs to one database
    transaction. Nested blocks join the outermost one.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._depth = 0

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

        try:
            yield
        except BaseException as e:
            logfire.warn("Transaction rollback", error=str(e))
            await self.session.rollback()
            raise
        else:
            await self.session.commit()
        finally:
            self._depth = 0
