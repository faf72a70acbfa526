"""Analysis report produced by the external clustering service."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from pydantic import Field

from agora.domain.model.common import AggregateRoot, DomainModel
from agora.domain.value import AnalysisFeedbackType, AnalysisReportId, TalkSessionId, UserId

REPORT_STALENESS = timedelta(minutes=10)


class AnalysisFeedback(DomainModel):
    id: UUID = Field(default_factory=uuid4)
    type: AnalysisFeedbackType
    user_id: UserId
    created_at: datetime


class AnalysisReport(AggregateRoot):
    """Latest generated report for a talk session."""

    id: AnalysisReportId
    talk_session_id: TalkSessionId
    report: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    feedbacks: list[AnalysisFeedback] = Field(default_factory=list)

    def should_regenerate_report(
        self, now: datetime, staleness: timedelta = REPORT_STALENESS
    ) -> bool:
        """True when there is no report text yet or it is older than ``staleness``."""
        if self.report is None:
            return True
        return now - self.updated_at > staleness

    def apply_feedback(
        self, feedback_type: AnalysisFeedbackType, user_id: UserId, now: datetime
    ) -> None:
        self.feedbacks = [
            *self.feedbacks,
            AnalysisFeedback(type=feedback_type, user_id=user_id, created_at=now),
        ]
        self.updated_at = now

    def has_received_feedback_from(self, user_id: UserId) -> bool:
        return any(f.user_id == user_id for f in self.feedbacks)
