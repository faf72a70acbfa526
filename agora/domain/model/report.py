"""Opinion reports (moderation).

Reports against one opinion move through their status together: the
session owner resolves all of them in a single bulk update.
"""

from collections import Counter
from datetime import datetime
from typing import Optional

from agora.domain.model.common import DomainModel
from agora.domain.value import (
    OpinionId,
    ReportId,
    ReportReason,
    ReportStatus,
    TalkSessionId,
    UserId,
)
from agora.domain.value.common import ValueObject


class Report(DomainModel):
    """A participant's flag on an opinion."""

    id: ReportId
    opinion_id: OpinionId
    talk_session_id: TalkSessionId
    reporter_id: UserId
    reason: ReportReason
    reason_text: Optional[str] = None
    status: ReportStatus = ReportStatus.UNSOLVED
    created_at: datetime

    def with_status(self, status: ReportStatus) -> "Report":
        return self.model_copy(update={"status": status})


class ReasonCount(ValueObject):
    reason: ReportReason
    label: str
    count: int


class ReportSummary(ValueObject):
    """Reports on one opinion as shown to the session owner.

    Multiple reports from the same reporter are counted once; the first
    report from each reporter decides which reason is counted.
    """

    opinion_id: OpinionId
    reporter_count: int
    reasons: list[ReasonCount]

    @classmethod
    def from_reports(cls, opinion_id: OpinionId, reports: list[Report]) -> "ReportSummary":
        first_by_reporter: dict[UserId, Report] = {}
        for report in sorted(reports, key=lambda r: r.created_at):
            first_by_reporter.setdefault(report.reporter_id, report)

        counts = Counter(r.reason for r in first_by_reporter.values())
        return cls(
            opinion_id=opinion_id,
            reporter_count=len(first_by_reporter),
            reasons=[
                ReasonCount(reason=reason, label=reason.label, count=counts[reason])
                for reason in ReportReason
                if counts[reason]
            ],
        )
