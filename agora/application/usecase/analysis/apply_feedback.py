"""Apply feedback use case."""

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.error import (
    AnalysisReportAlreadyFeedbackedError,
    AnalysisReportNotFoundError,
)
from agora.domain.repository import AnalysisReportRepository, TransactionManager
from agora.domain.value import AnalysisFeedbackType, AnalysisReportId, UserId, parse_id


class ApplyFeedbackRequest(BaseModel):
    report_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    feedback_type: str  # "good" | "bad"


class ApplyFeedbackResponse(BaseModel):
    report_id: str
    feedback_count: int


class ApplyFeedbackUseCase:
    """Records a participant's good/bad reaction to a generated report."""

    def __init__(
        self,
        analysis_report_repository: AnalysisReportRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self.analysis_report_repository = analysis_report_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: ApplyFeedbackRequest) -> ApplyFeedbackResponse:
        """Add one feedback per user to a report.

        The lookup, the duplicate check and the save share one transaction.

        Raises:
            InvalidAnalysisFeedbackTypeError: If the type is not good or bad
            AnalysisReportNotFoundError: If the report does not exist
            AnalysisReportAlreadyFeedbackedError: If the user already reacted
        """
        report_id = AnalysisReportId(parse_id(request.report_id, "report_id"))
        user_id = UserId(parse_id(request.user_id, "user_id"))
        feedback_type = AnalysisFeedbackType.parse(request.feedback_type)

        with logfire.span("apply_feedback", report_id=str(report_id)):
            async with self.transaction_manager.transaction():
                report = await self.analysis_report_repository.find_by_id(report_id)
                if report is None:
                    raise AnalysisReportNotFoundError(report_id)

                if report.has_received_feedback_from(user_id):
                    raise AnalysisReportAlreadyFeedbackedError(report_id, user_id)

                report.apply_feedback(feedback_type, user_id, self.clock.now())
                await self.analysis_report_repository.save(report)

            logfire.info(
                "Report feedback applied",
                report_id=str(report_id),
                feedback_type=feedback_type.value,
            )

            return ApplyFeedbackResponse(
                report_id=str(report.id), feedback_count=len(report.feedbacks)
            )
