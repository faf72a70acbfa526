"""Unit tests for analysis report staleness."""

from datetime import timedelta
from uuid import uuid4

from agora.domain.model import AnalysisReport
from agora.domain.value import (
    AnalysisFeedbackType,
    AnalysisReportId,
    TalkSessionId,
    UserId,
)
from tests.di import TEST_NOW


def _report(text, updated_ago: timedelta) -> AnalysisReport:
    return AnalysisReport(
        id=AnalysisReportId(uuid4()),
        talk_session_id=TalkSessionId(uuid4()),
        report=text,
        created_at=TEST_NOW - updated_ago,
        updated_at=TEST_NOW - updated_ago,
    )


class TestShouldRegenerateReport:
    def test_missing_text_always_regenerates(self):
        assert _report(None, timedelta(0)).should_regenerate_report(TEST_NOW)

    def test_fresh_report_is_kept(self):
        report = _report("summary", timedelta(minutes=5))

        assert not report.should_regenerate_report(TEST_NOW)

    def test_report_at_exact_staleness_is_kept(self):
        report = _report("summary", timedelta(minutes=10))

        assert not report.should_regenerate_report(TEST_NOW)

    def test_stale_report_regenerates(self):
        report = _report("summary", timedelta(minutes=10, seconds=1))

        assert report.should_regenerate_report(TEST_NOW)

    def test_custom_staleness(self):
        report = _report("summary", timedelta(minutes=2))

        assert report.should_regenerate_report(TEST_NOW, timedelta(minutes=1))


class TestFeedback:
    def test_apply_feedback(self):
        report = _report("summary", timedelta(minutes=1))
        user_id = UserId(uuid4())

        report.apply_feedback(AnalysisFeedbackType.GOOD, user_id, TEST_NOW)

        assert report.has_received_feedback_from(user_id)
        assert report.updated_at == TEST_NOW
        assert not report.has_received_feedback_from(UserId(uuid4()))
