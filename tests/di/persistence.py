"""Mock persistence providers for testing."""

from dishka import Scope, alias, provide

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
from agora.persistence.repository.inmemory import (
    InMemoryActionItemRepository,
    InMemoryAnalysisReportRepository,
    InMemoryConclusionRepository,
    InMemoryDetachedAnalysisReportReader,
    InMemoryDomainEventRepository,
    InMemoryOpinionRepository,
    InMemoryReportRepository,
    InMemoryTalkSessionConsentRepository,
    InMemoryTalkSessionRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Everything is APP scoped so request code and detached background work
    share one set of rows. Each test builds its own container, which keeps
    tests isolated.

    Both the concrete in-memory types and the repository interfaces are
    resolvable, so tests can inspect state the interfaces do not expose.
    """

    __is_mock__ = True

    scope = Scope.APP

    users = provide(InMemoryUserRepository)
    talk_sessions = provide(InMemoryTalkSessionRepository)
    opinions = provide(InMemoryOpinionRepository)
    votes = provide(InMemoryVoteRepository)
    reports = provide(InMemoryReportRepository)
    consents = provide(InMemoryTalkSessionConsentRepository)
    action_items = provide(InMemoryActionItemRepository)
    conclusions = provide(InMemoryConclusionRepository)
    analysis_reports = provide(InMemoryAnalysisReportRepository)
    events = provide(InMemoryDomainEventRepository)

    user_repository = alias(source=InMemoryUserRepository, provides=UserRepository)
    talk_session_repository = alias(
        source=InMemoryTalkSessionRepository, provides=TalkSessionRepository
    )
    opinion_repository = alias(
        source=InMemoryOpinionRepository, provides=OpinionRepository
    )
    vote_repository = alias(source=InMemoryVoteRepository, provides=VoteRepository)
    report_repository = alias(
        source=InMemoryReportRepository, provides=ReportRepository
    )
    consent_repository = alias(
        source=InMemoryTalkSessionConsentRepository,
        provides=TalkSessionConsentRepository,
    )
    action_item_repository = alias(
        source=InMemoryActionItemRepository, provides=ActionItemRepository
    )
    conclusion_repository = alias(
        source=InMemoryConclusionRepository, provides=ConclusionRepository
    )
    analysis_report_repository = alias(
        source=InMemoryAnalysisReportRepository, provides=AnalysisReportRepository
    )
    event_repository = alias(
        source=InMemoryDomainEventRepository, provides=DomainEventRepository
    )
    transaction_manager = alias(
        source=InMemoryTransactionManager, provides=TransactionManager
    )

    @provide
    def get_transaction_manager(
        self,
        users: InMemoryUserRepository,
        talk_sessions: InMemoryTalkSessionRepository,
        opinions: InMemoryOpinionRepository,
        votes: InMemoryVoteRepository,
        reports: InMemoryReportRepository,
        consents: InMemoryTalkSessionConsentRepository,
        action_items: InMemoryActionItemRepository,
        conclusions: InMemoryConclusionRepository,
        analysis_reports: InMemoryAnalysisReportRepository,
        events: InMemoryDomainEventRepository,
    ) -> InMemoryTransactionManager:
        """Unit of work that restores every repository on failure."""
        return InMemoryTransactionManager(
            [
                users,
                talk_sessions,
                opinions,
                votes,
                reports,
                consents,
                action_items,
                conclusions,
                analysis_reports,
                events,
            ]
        )

    @provide
    def get_detached_report_reader(
        self, repository: InMemoryAnalysisReportRepository
    ) -> DetachedAnalysisReportReader:
        return InMemoryDetachedAnalysisReportReader(repository)
