"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    ActionItemId,
    AnalysisReportId,
    ImageId,
    OpinionId,
    ReportId,
    TalkSessionId,
    UserId,
    VoteId,
    parse_id,
)
from agora.domain.value.types import (
    ActionStatus,
    AnalysisFeedbackType,
    ReportReason,
    ReportStatus,
    RestrictionAttributeKey,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "TalkSessionId",
    "OpinionId",
    "VoteId",
    "ReportId",
    "ActionItemId",
    "AnalysisReportId",
    "ImageId",
    "parse_id",
    # Types
    "ActionStatus",
    "AnalysisFeedbackType",
    "ReportReason",
    "ReportStatus",
    "RestrictionAttributeKey",
    "VoteType",
]
