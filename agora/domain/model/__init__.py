"""Domain model entities for Agora."""

from agora.domain.model.action_item import ActionItem
from agora.domain.model.analysis import AnalysisFeedback, AnalysisReport
from agora.domain.model.conclusion import Conclusion
from agora.domain.model.consent import TalkSessionConsent
from agora.domain.model.event import DomainEvent, TalkSessionEnded, TalkSessionStarted
from agora.domain.model.image import ImageMeta, ImageValidationRule
from agora.domain.model.location import Location
from agora.domain.model.opinion import Opinion
from agora.domain.model.report import Report, ReportSummary
from agora.domain.model.restriction import RestrictionAttribute
from agora.domain.model.talk_session import TalkSession
from agora.domain.model.user import DateOfBirth, Demographics, User
from agora.domain.model.vote import Vote

__all__ = [
    "ActionItem",
    "AnalysisFeedback",
    "AnalysisReport",
    "Conclusion",
    "DateOfBirth",
    "Demographics",
    "DomainEvent",
    "ImageMeta",
    "ImageValidationRule",
    "Location",
    "Opinion",
    "Report",
    "ReportSummary",
    "RestrictionAttribute",
    "TalkSession",
    "TalkSessionConsent",
    "TalkSessionEnded",
    "TalkSessionStarted",
    "User",
    "Vote",
]
