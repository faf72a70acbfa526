"""Solve report use case."""


import logfire
from pydantic import BaseModel

from agora.domain.error import OpinionNotFoundError, TalkSessionNotFoundError
from agora.domain.repository import (
    OpinionRepository,
    ReportRepository,
    TalkSessionRepository,
    TransactionManager,
)
from agora.domain.value import OpinionId, ReportStatus, UserId, parse_id


class SolveReportRequest(BaseModel):
    """Solve report request."""

    opinion_id: str  # UUID string
    user_id: str  # Session owner ID from authenticated user
    status: str  # "unsolved" | "deleted" | "hold"


class SolveReportResponse(BaseModel):
    """Solve report response."""

    opinion_id: str
    status: str
    updated_count: int


class SolveReportUseCase:
    """Use case for resolving every report on an opinion at once."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        report_repository: ReportRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.opinion_repository = opinion_repository
        self.talk_session_repository = talk_session_repository
        self.report_repository = report_repository
        self.transaction_manager = transaction_manager

    async def execute(self, request: SolveReportRequest) -> SolveReportResponse:
        """Move all reports of an opinion to a new status.

        Only the owner of the opinion's session may do this. Anyone else
        gets the same error as for a missing session.

        Raises:
            InvalidReportStatusError: If the status is unknown
            OpinionNotFoundError: If the opinion does not exist
            TalkSessionNotFoundError: If the session is missing or not owned
        """
        opinion_id = OpinionId(parse_id(request.opinion_id, "opinion_id"))
        user_id = UserId(parse_id(request.user_id, "user_id"))
        status = ReportStatus.parse(request.status)

        with logfire.span("solve_report", opinion_id=str(opinion_id), status=status.value):
            opinion = await self.opinion_repository.find_by_id(opinion_id)
            if opinion is None:
                raise OpinionNotFoundError(opinion_id)

            talk_session = await self.talk_session_repository.find_by_id(
                opinion.talk_session_id
            )
            if talk_session is None or not talk_session.is_owner(user_id):
                raise TalkSessionNotFoundError(opinion.talk_session_id)

            async with self.transaction_manager.transaction():
                reports = await self.report_repository.find_by_opinion_id(opinion_id)
                for report in reports:
                    await self.report_repository.update_status(report.id, status)

            logfire.info(
                "Reports solved",
                opinion_id=str(opinion_id),
                status=status.value,
                count=len(reports),
            )

            return SolveReportResponse(
                opinion_id=str(opinion_id),
                status=status.value,
                updated_count=len(reports),
            )
