"""Repository interfaces for the Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from agora.domain.repository.action_item import ActionItemRepository
from agora.domain.repository.analysis import (
    AnalysisReportRepository,
    DetachedAnalysisReportReader,
)
from agora.domain.repository.conclusion import ConclusionRepository
from agora.domain.repository.consent import TalkSessionConsentRepository
from agora.domain.repository.event import DomainEventRepository
from agora.domain.repository.opinion import OpinionRepository
from agora.domain.repository.report import ReportRepository
from agora.domain.repository.talk_session import TalkSessionRepository
from agora.domain.repository.transaction import TransactionManager
from agora.domain.repository.user import UserRepository
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "ActionItemRepository",
    "AnalysisReportRepository",
    "ConclusionRepository",
    "DetachedAnalysisReportReader",
    "DomainEventRepository",
    "OpinionRepository",
    "ReportRepository",
    "TalkSessionConsentRepository",
    "TalkSessionRepository",
    "TransactionManager",
    "UserRepository",
    "VoteRepository",
]
