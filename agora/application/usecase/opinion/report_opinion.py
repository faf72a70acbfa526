"""Report opinion use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.error import OpinionNotFoundError
from agora.domain.repository import (
    OpinionRepository,
    ReportRepository,
    TransactionManager,
)
from agora.domain.value import OpinionId, UserId, parse_id


class ReportOpinionRequest(BaseModel):
    """Report opinion request."""

    opinion_id: str  # UUID string
    reporter_id: str  # User ID from authenticated user
    reason: int  # Reason code; unknown codes count as "other"
    reason_text: Optional[str] = None


class ReportOpinionResponse(BaseModel):
    """Report opinion response."""

    report_id: str
    opinion_id: str
    reason: int
    reason_label: str
    status: str
    created_at: datetime


class ReportOpinionUseCase:
    """Use case for flagging an opinion for the session owner."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        report_repository: ReportRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self.opinion_repository = opinion_repository
        self.report_repository = report_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: ReportOpinionRequest) -> ReportOpinionResponse:
        """File a report. The same user may report an opinion more than once.

        Raises:
            OpinionNotFoundError: If the opinion does not exist
        """
        opinion_id = OpinionId(parse_id(request.opinion_id, "opinion_id"))
        reporter_id = UserId(parse_id(request.reporter_id, "reporter_id"))

        with logfire.span(
            "report_opinion", opinion_id=str(opinion_id), reporter_id=str(reporter_id)
        ):
            opinion = await self.opinion_repository.find_by_id(opinion_id)
            if opinion is None:
                raise OpinionNotFoundError(opinion_id)

            report = opinion.report(
                reporter_id=reporter_id,
                reason_code=request.reason,
                now=self.clock.now(),
                reason_text=request.reason_text,
            )

            async with self.transaction_manager.transaction():
                report = await self.report_repository.create(report)

            logfire.info(
                "Opinion reported",
                opinion_id=str(opinion_id),
                reason=report.reason.name,
            )

            return ReportOpinionResponse(
                report_id=str(report.id),
                opinion_id=str(report.opinion_id),
                reason=report.reason.value,
                reason_label=report.reason.label,
                status=report.status.value,
                created_at=report.created_at,
            )
