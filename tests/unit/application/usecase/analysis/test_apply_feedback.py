"""Unit tests for ApplyFeedbackUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.analysis import (
    ApplyFeedbackRequest,
    ApplyFeedbackUseCase,
)
from agora.domain.error import (
    AnalysisReportAlreadyFeedbackedError,
    AnalysisReportNotFoundError,
    InvalidAnalysisFeedbackTypeError,
)
from agora.domain.model import AnalysisReport
from agora.domain.repository import AnalysisReportRepository
from agora.domain.value import AnalysisFeedbackType, AnalysisReportId, TalkSessionId
from agora.persistence.repository.inmemory import InMemoryTransactionManager
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_report(env) -> AnalysisReport:
    report_repo = await env.get(AnalysisReportRepository)
    return await report_repo.save(
        AnalysisReport(
            id=AnalysisReportId(uuid4()),
            talk_session_id=TalkSessionId(uuid4()),
            report="Most participants want more shade along the river.",
            created_at=TEST_NOW,
            updated_at=TEST_NOW,
        )
    )


class TestApplyFeedback:
    @pytest.mark.asyncio
    async def test_feedback_is_saved(self, unit_env):
        use_case = await unit_env.get(ApplyFeedbackUseCase)
        report_repo = await unit_env.get(AnalysisReportRepository)
        transaction_manager = await unit_env.get(InMemoryTransactionManager)
        report = await _seed_report(unit_env)
        user_id = uuid4()

        response = await use_case.execute(
            ApplyFeedbackRequest(
                report_id=str(report.id), user_id=str(user_id), feedback_type="good"
            )
        )

        assert response.report_id == str(report.id)
        assert response.feedback_count == 1
        assert transaction_manager.commits == 1
        stored = await report_repo.find_by_id(report.id)
        assert [(f.type, f.user_id) for f in stored.feedbacks] == [
            (AnalysisFeedbackType.GOOD, user_id)
        ]

    @pytest.mark.asyncio
    async def test_one_feedback_per_user(self, unit_env):
        use_case = await unit_env.get(ApplyFeedbackUseCase)
        report_repo = await unit_env.get(AnalysisReportRepository)
        transaction_manager = await unit_env.get(InMemoryTransactionManager)
        report = await _seed_report(unit_env)
        request = ApplyFeedbackRequest(
            report_id=str(report.id), user_id=str(uuid4()), feedback_type="good"
        )
        await use_case.execute(request)

        with pytest.raises(AnalysisReportAlreadyFeedbackedError):
            await use_case.execute(request.model_copy(update={"feedback_type": "bad"}))

        assert transaction_manager.rollbacks == 1
        stored = await report_repo.find_by_id(report.id)
        assert [f.type for f in stored.feedbacks] == [AnalysisFeedbackType.GOOD]

    @pytest.mark.asyncio
    async def test_feedback_from_different_users_accumulates(self, unit_env):
        use_case = await unit_env.get(ApplyFeedbackUseCase)
        report = await _seed_report(unit_env)

        for feedback_type in ("good", "bad"):
            response = await use_case.execute(
                ApplyFeedbackRequest(
                    report_id=str(report.id),
                    user_id=str(uuid4()),
                    feedback_type=feedback_type,
                )
            )

        assert response.feedback_count == 2

    @pytest.mark.asyncio
    async def test_unknown_report(self, unit_env):
        use_case = await unit_env.get(ApplyFeedbackUseCase)

        with pytest.raises(AnalysisReportNotFoundError):
            await use_case.execute(
                ApplyFeedbackRequest(
                    report_id=str(uuid4()), user_id=str(uuid4()), feedback_type="bad"
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_feedback_type(self, unit_env):
        use_case = await unit_env.get(ApplyFeedbackUseCase)
        report_repo = await unit_env.get(AnalysisReportRepository)
        report = await _seed_report(unit_env)

        with pytest.raises(InvalidAnalysisFeedbackTypeError):
            await use_case.execute(
                ApplyFeedbackRequest(
                    report_id=str(report.id), user_id=str(uuid4()), feedback_type="meh"
                )
            )

        stored = await report_repo.find_by_id(report.id)
        assert stored.feedbacks == []
