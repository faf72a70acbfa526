"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agora.config import Settings
from agora.domain.repository import (
    ActionItemRepository,
    AnalysisReportRepository,
    ConclusionRepository,
    DetachedAnalysisReportReader,
    DomainEventRepository,
    OpinionRepository,
    ReportRepository,
    TalkSessionConsentRepository,
    TalkSessionRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from agora.persistence.database import create_engine, create_session_factory
from agora.persistence.repository import (
    PostgresActionItemRepository,
    PostgresAnalysisReportRepository,
    PostgresConclusionRepository,
    PostgresDetachedAnalysisReportReader,
    PostgresDomainEventRepository,
    PostgresOpinionRepository,
    PostgresReportRepository,
    PostgresTalkSessionConsentRepository,
    PostgresTalkSessionRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
    SqlAlchemyTransactionManager,
)
from agora.util.di.base import ProviderBase
from agora.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Writes are committed by the transaction manager. Anything still
        open when the request ends was read-only and is rolled back.
        """
        async with session_factory() as session:
            yield session
            if session.in_transaction():
                logfire.debug("Closing read-only request transaction")
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide unit of work bound to the request session."""
        return SqlAlchemyTransactionManager(session)

    @provide(scope=Scope.APP)
    def get_detached_report_reader(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> DetachedAnalysisReportReader:
        """Provide report reader for work that outlives the request."""
        return PostgresDetachedAnalysisReportReader(session_factory)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_talk_session_repository(
        self, session: AsyncSession
    ) -> TalkSessionRepository:
        """Provide TalkSession repository."""
        return PostgresTalkSessionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_opinion_repository(self, session: AsyncSession) -> OpinionRepository:
        """Provide Opinion repository."""
        return PostgresOpinionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, session: AsyncSession) -> ReportRepository:
        """Provide Report repository."""
        return PostgresReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_consent_repository(
        self, session: AsyncSession
    ) -> TalkSessionConsentRepository:
        """Provide TalkSessionConsent repository."""
        return PostgresTalkSessionConsentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_action_item_repository(
        self, session: AsyncSession
    ) -> ActionItemRepository:
        """Provide ActionItem repository."""
        return PostgresActionItemRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_conclusion_repository(self, session: AsyncSession) -> ConclusionRepository:
        """Provide Conclusion repository."""
        return PostgresConclusionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_analysis_report_repository(
        self, session: AsyncSession
    ) -> AnalysisReportRepository:
        """Provide AnalysisReport repository."""
        return PostgresAnalysisReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, session: AsyncSession) -> DomainEventRepository:
        """Provide domain event store."""
        return PostgresDomainEventRepository(session)
