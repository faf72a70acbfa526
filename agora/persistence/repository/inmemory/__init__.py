"""In-memory repository implementations for testing."""

from .action_item import InMemoryActionItemRepository
from .analysis import (
    InMemoryAnalysisReportRepository,
    InMemoryDetachedAnalysisReportReader,
)
from .conclusion import InMemoryConclusionRepository
from .consent import InMemoryTalkSessionConsentRepository
from .event import InMemoryDomainEventRepository
from .opinion import InMemoryOpinionRepository
from .report import InMemoryReportRepository
from .talk_session import InMemoryTalkSessionRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryActionItemRepository",
    "InMemoryAnalysisReportRepository",
    "InMemoryConclusionRepository",
    "InMemoryDetachedAnalysisReportReader",
    "InMemoryDomainEventRepository",
    "InMemoryOpinionRepository",
    "InMemoryReportRepository",
    "InMemoryTalkSessionConsentRepository",
    "InMemoryTalkSessionRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
