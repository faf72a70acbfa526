"""Get report summary use case."""


from pydantic import BaseModel

from agora.domain.error import OpinionNotFoundError, TalkSessionNotFoundError
from agora.domain.model.report import ReportSummary
from agora.domain.repository import (
    OpinionRepository,
    ReportRepository,
    TalkSessionRepository,
)
from agora.domain.value import OpinionId, ReportStatus, UserId, parse_id


class GetReportSummaryRequest(BaseModel):
    opinion_id: str  # UUID string
    user_id: str  # Session owner ID from authenticated user


class ReasonCountResponse(BaseModel):
    reason: int
    label: str
    count: int


class GetReportSummaryResponse(BaseModel):
    opinion_id: str
    status: str
    reporter_count: int
    reasons: list[ReasonCountResponse]


class GetReportSummaryUseCase:
    """Reports on one opinion, grouped by reason, for the session owner."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        report_repository: ReportRepository,
    ) -> None:
        self.opinion_repository = opinion_repository
        self.talk_session_repository = talk_session_repository
        self.report_repository = report_repository

    async def execute(self, request: GetReportSummaryRequest) -> GetReportSummaryResponse:
        opinion_id = OpinionId(parse_id(request.opinion_id, "opinion_id"))
        user_id = UserId(parse_id(request.user_id, "user_id"))

        opinion = await self.opinion_repository.find_by_id(opinion_id)
        if opinion is None:
            raise OpinionNotFoundError(opinion_id)

        talk_session = await self.talk_session_repository.find_by_id(
            opinion.talk_session_id
        )
        if talk_session is None or not talk_session.is_owner(user_id):
            raise TalkSessionNotFoundError(opinion.talk_session_id)

        reports = await self.report_repository.find_by_opinion_id(opinion_id)
        summary = ReportSummary.from_reports(opinion_id, reports)

        # Reports move together, so any one of them carries the current status
        status = reports[0].status if reports else ReportStatus.UNSOLVED

        return GetReportSummaryResponse(
            opinion_id=str(opinion_id),
            status=status.value,
            reporter_count=summary.reporter_count,
            reasons=[
                ReasonCountResponse(
                    reason=item.reason.value, label=item.label, count=item.count
                )
                for item in summary.reasons
            ],
        )
