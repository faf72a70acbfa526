"""Fire-and-forget analysis kick-off after a vote."""

from datetime import timedelta

import logfire

from agora.application.background import BackgroundTasks
from agora.config import AnalysisSettings
from agora.domain.clock import Clock
from agora.domain.repository import DetachedAnalysisReportReader
from agora.domain.service import AnalysisService
from agora.domain.value import TalkSessionId


class AnalysisTrigger:
    """Asks the analysis service to refresh a session after it changed.

    Dispatch returns immediately. The external service's latency and
    failures never reach the caller; they are logged and dropped.
    """

    def __init__(
        self,
        analysis_service: AnalysisService,
        report_reader: DetachedAnalysisReportReader,
        background_tasks: BackgroundTasks,
        clock: Clock,
        settings: AnalysisSettings,
    ) -> None:
        self.analysis_service = analysis_service
        self.report_reader = report_reader
        self.background_tasks = background_tasks
        self.clock = clock
        self.staleness = timedelta(minutes=settings.report_staleness_minutes)

    def dispatch(self, talk_session_id: TalkSessionId) -> None:
        """Schedule analysis for a talk session without waiting for it."""
        self.background_tasks.spawn(
            self._run(talk_session_id),
            name=f"analysis-{talk_session_id}",
        )

    async def _run(self, talk_session_id: TalkSessionId) -> None:
        with logfire.span("analysis_trigger", talk_session_id=str(talk_session_id)):
            try:
                await self.analysis_service.start_analysis(talk_session_id)
            except Exception as e:
                logfire.error(
                    "Failed to start analysis",
                    talk_session_id=str(talk_session_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )

            try:
                report = await self.report_reader.find_by_talk_session_id(
                    talk_session_id
                )
                if report is not None and not report.should_regenerate_report(
                    self.clock.now(), self.staleness
                ):
                    return
                await self.analysis_service.generate_report(talk_session_id)
            except Exception as e:
                logfire.error(
                    "Failed to regenerate analysis report",
                    talk_session_id=str(talk_session_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
