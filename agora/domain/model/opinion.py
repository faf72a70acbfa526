"""Opinion aggregate.

Opinions are short posts inside a talk session, optionally replying to
another opinion. Reply nesting is unbounded in depth.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field, field_validator, model_validator

from agora.domain.error import (
    OpinionContentError,
    OpinionParentIsSelfError,
    OpinionTitleError,
)
from agora.domain.model.common import AggregateRoot
from agora.domain.model.report import Report
from agora.domain.value import (
    OpinionId,
    ReportId,
    ReportReason,
    ReportStatus,
    TalkSessionId,
    UserId,
    VoteType,
)

CONTENT_MIN_LENGTH = 5
CONTENT_MAX_LENGTH = 140
TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 50

MASKED_CONTENT_HEADER = "この意見は運営により削除されました。\n削除理由:\n"


class Opinion(AggregateRoot):
    """Opinion aggregate.

    Business rules:
    - Content is 5-140 characters
    - Title, when present, is 5-50 characters
    - An opinion never replies to itself
    """

    id: OpinionId
    talk_session_id: TalkSessionId
    author_id: Optional[UserId]  # None once masked
    parent_opinion_id: Optional[OpinionId] = None
    title: Optional[str] = None
    content: str
    created_at: datetime
    reference_url: Optional[str] = None
    reference_image_url: Optional[str] = None

    # Read-side projections, never persisted
    replies: list["Opinion"] = Field(default_factory=list, exclude=True)
    vote_status: VoteType = Field(default=VoteType.UNVOTED, exclude=True)
    is_deleted: bool = Field(default=False, exclude=True)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not CONTENT_MIN_LENGTH <= len(v) <= CONTENT_MAX_LENGTH:
            raise OpinionContentError(len(v))
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not TITLE_MIN_LENGTH <= len(v) <= TITLE_MAX_LENGTH:
            raise OpinionTitleError(len(v))
        return v

    @model_validator(mode="after")
    def validate_parent(self) -> "Opinion":
        if self.parent_opinion_id is not None and self.parent_opinion_id == self.id:
            raise OpinionParentIsSelfError(self.id)
        return self

    @classmethod
    def create(
        cls,
        talk_session_id: TalkSessionId,
        author_id: UserId,
        content: str,
        now: datetime,
        parent_opinion_id: Optional[OpinionId] = None,
        title: Optional[str] = None,
        reference_url: Optional[str] = None,
        opinion_id: Optional[OpinionId] = None,
    ) -> "Opinion":
        """Create a new opinion.

        Raises:
            OpinionContentError: If content length is out of range
            OpinionTitleError: If title length is out of range
            OpinionParentIsSelfError: If the opinion replies to itself
        """
        return cls(
            id=opinion_id or OpinionId(uuid4()),
            talk_session_id=talk_session_id,
            author_id=author_id,
            parent_opinion_id=parent_opinion_id,
            title=title,
            content=content,
            created_at=now,
            reference_url=reference_url,
        )

    @property
    def is_reply(self) -> bool:
        return self.parent_opinion_id is not None

    def reply(self, opinion: "Opinion") -> None:
        self.replies.append(opinion)

    def count(self) -> int:
        """Number of direct replies. Nested replies are not included."""
        return len(self.replies)

    def is_voted(self) -> bool:
        return self.vote_status is not VoteType.UNVOTED

    def apply_vote(self, vote_type: VoteType) -> None:
        self.vote_status = vote_type

    def change_reference_image_url(self, url: Optional[str]) -> None:
        self.reference_image_url = url

    def report(
        self,
        reporter_id: UserId,
        reason_code: int,
        now: datetime,
        reason_text: Optional[str] = None,
    ) -> Report:
        """File a report against this opinion.

        Unknown reason codes are recorded as ``OTHER``.
        """
        return Report(
            id=ReportId(uuid4()),
            opinion_id=self.id,
            talk_session_id=self.talk_session_id,
            reporter_id=reporter_id,
            reason=ReportReason.from_code(reason_code),
            reason_text=reason_text,
            status=ReportStatus.UNSOLVED,
            created_at=now,
        )

    def mask(self, reports: list[Report]) -> "Opinion":
        """Redacted copy shown once reports resolve to ``deleted``.

        The replacement text lists the reason of every report.
        """
        if not reports:
            return self
        reasons = "".join(f"・{report.reason.label}\n" for report in reports)
        return self.model_copy(
            update={
                "author_id": None,
                "title": None,
                "content": MASKED_CONTENT_HEADER + reasons,
                "reference_url": None,
                "reference_image_url": None,
                "is_deleted": True,
            }
        )
