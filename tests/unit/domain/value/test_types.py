"""Unit tests for domain enumerations."""

import pytest

from agora.domain.error import (
    InvalidActionStatusError,
    InvalidReportStatusError,
    InvalidVoteTypeError,
)
from agora.domain.value import ActionStatus, ReportReason, ReportStatus, VoteType


class TestVoteType:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("agree", VoteType.AGREE),
            ("disagree", VoteType.DISAGREE),
            ("pass", VoteType.PASS),
            ("AGREE", VoteType.AGREE),
        ],
    )
    def test_parse(self, value, expected):
        assert VoteType.parse(value) is expected

    @pytest.mark.parametrize("value", ["unvoted", "maybe", ""])
    def test_parse_rejects(self, value):
        with pytest.raises(InvalidVoteTypeError):
            VoteType.parse(value)

    def test_persisted_values(self):
        assert [v.value for v in VoteType] == [0, 1, 2, 3]


class TestReportReason:
    def test_known_code(self):
        assert ReportReason.from_code(3) is ReportReason.HARASSMENT

    @pytest.mark.parametrize("code", [0, 5, -1])
    def test_unknown_code_is_other(self, code):
        assert ReportReason.from_code(code) is ReportReason.OTHER


class TestReportStatus:
    def test_parse(self):
        assert ReportStatus.parse("deleted") is ReportStatus.DELETED

    def test_parse_rejects(self):
        with pytest.raises(InvalidReportStatusError):
            ReportStatus.parse("removed")


class TestActionStatus:
    def test_parse_label(self):
        assert ActionStatus.parse("進行中") is ActionStatus.IN_PROGRESS

    def test_parse_rejects(self):
        with pytest.raises(InvalidActionStatusError):
            ActionStatus.parse("done")
