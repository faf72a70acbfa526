"""PostgreSQL repository implementations."""

from agora.persistence.repository.action_item import PostgresActionItemRepository
from agora.persistence.repository.analysis import (
    PostgresAnalysisReportRepository,
    PostgresDetachedAnalysisReportReader,
)
from agora.persistence.repository.conclusion import PostgresConclusionRepository
from agora.persistence.repository.consent import PostgresTalkSessionConsentRepository
from agora.persistence.repository.event import PostgresDomainEventRepository
from agora.persistence.repository.opinion import PostgresOpinionRepository
from agora.persistence.repository.report import PostgresReportRepository
from agora.persistence.repository.talk_session import PostgresTalkSessionRepository
from agora.persistence.repository.transaction import SqlAlchemyTransactionManager
from agora.persistence.repository.user import PostgresUserRepository
from agora.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresActionItemRepository",
    "PostgresAnalysisReportRepository",
    "PostgresConclusionRepository",
    "PostgresDetachedAnalysisReportReader",
    "PostgresDomainEventRepository",
    "PostgresOpinionRepository",
    "PostgresReportRepository",
    "PostgresTalkSessionConsentRepository",
    "PostgresTalkSessionRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
    "SqlAlchemyTransactionManager",
]
