"""Unit tests for the Opinion aggregate."""

from uuid import uuid4

import pytest

from agora.domain.error import (
    OpinionContentError,
    OpinionParentIsSelfError,
    OpinionTitleError,
)
from agora.domain.model import Opinion
from agora.domain.model.opinion import MASKED_CONTENT_HEADER
from agora.domain.value import (
    OpinionId,
    ReportReason,
    ReportStatus,
    TalkSessionId,
    UserId,
    VoteType,
)
from tests.di import TEST_NOW


def _create(content: str = "Plant more trees", **kwargs) -> Opinion:
    return Opinion.create(
        talk_session_id=TalkSessionId(uuid4()),
        author_id=UserId(uuid4()),
        content=content,
        now=TEST_NOW,
        **kwargs,
    )


class TestOpinionContent:
    """Content length boundaries."""

    @pytest.mark.parametrize("length", [5, 140])
    def test_accepts_content_at_bounds(self, length):
        opinion = _create("a" * length)

        assert len(opinion.content) == length

    @pytest.mark.parametrize("length", [4, 141])
    def test_rejects_content_outside_bounds(self, length):
        with pytest.raises(OpinionContentError) as exc_info:
            _create("a" * length)

        assert exc_info.value.code == "opinion_content_invalid"

    def test_rejects_short_japanese_content(self):
        """Length is counted in characters, not bytes."""
        with pytest.raises(OpinionContentError):
            _create("公園の木")

    def test_accepts_five_japanese_characters(self):
        opinion = _create("公園の木々")

        assert opinion.content == "公園の木々"


class TestOpinionTitle:
    """Optional title validation."""

    def test_title_is_optional(self):
        assert _create().title is None

    @pytest.mark.parametrize("length", [5, 50])
    def test_accepts_title_at_bounds(self, length):
        assert _create(title="t" * length).title == "t" * length

    @pytest.mark.parametrize("length", [4, 51])
    def test_rejects_title_outside_bounds(self, length):
        with pytest.raises(OpinionTitleError):
            _create(title="t" * length)


class TestOpinionParent:
    """Reply relationships."""

    def test_reply_to_other_opinion(self):
        parent_id = OpinionId(uuid4())

        opinion = _create(parent_opinion_id=parent_id)

        assert opinion.is_reply
        assert opinion.parent_opinion_id == parent_id

    def test_rejects_reply_to_itself(self):
        opinion_id = OpinionId(uuid4())

        with pytest.raises(OpinionParentIsSelfError):
            _create(opinion_id=opinion_id, parent_opinion_id=opinion_id)

    def test_count_includes_direct_replies_only(self):
        root = _create()
        child = _create(parent_opinion_id=root.id)
        grandchild = _create(parent_opinion_id=child.id)
        child.reply(grandchild)
        root.reply(child)

        assert root.count() == 1
        assert child.count() == 1


class TestOpinionVoteStatus:
    def test_new_opinion_is_not_voted(self):
        opinion = _create()

        assert opinion.vote_status is VoteType.UNVOTED
        assert not opinion.is_voted()

    def test_apply_vote_marks_voted(self):
        opinion = _create()

        opinion.apply_vote(VoteType.DISAGREE)

        assert opinion.is_voted()

    def test_projection_fields_are_not_dumped(self):
        dumped = _create().model_dump()

        assert "replies" not in dumped
        assert "vote_status" not in dumped


class TestOpinionReport:
    def test_report_starts_unsolved(self):
        opinion = _create()
        reporter_id = UserId(uuid4())

        report = opinion.report(reporter_id, ReportReason.SPAM.value, TEST_NOW)

        assert report.opinion_id == opinion.id
        assert report.talk_session_id == opinion.talk_session_id
        assert report.reason is ReportReason.SPAM
        assert report.status is ReportStatus.UNSOLVED

    def test_unknown_reason_code_is_other(self):
        report = _create().report(UserId(uuid4()), 99, TEST_NOW)

        assert report.reason is ReportReason.OTHER

    def test_mask_hides_author_and_content(self):
        opinion = _create(title="About the park", reference_url="https://example.com")
        reports = [
            opinion.report(UserId(uuid4()), ReportReason.SPAM.value, TEST_NOW),
            opinion.report(UserId(uuid4()), ReportReason.HARASSMENT.value, TEST_NOW),
        ]

        masked = opinion.mask(reports)

        assert masked.id == opinion.id
        assert masked.author_id is None
        assert masked.title is None
        assert masked.reference_url is None
        assert masked.is_deleted
        assert masked.content == (
            MASKED_CONTENT_HEADER + "・スパム・宣伝\n" + "・誹謗中傷・嫌がらせ\n"
        )
        # Original is untouched
        assert opinion.author_id is not None

    def test_mask_without_reports_is_a_no_op(self):
        opinion = _create()

        masked = opinion.mask([])

        assert masked.content == opinion.content
        assert not masked.is_deleted
