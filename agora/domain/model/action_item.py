"""Timeline action items.

Action items record what happened after a session finished. They are
ordered by ``sequence`` within a session; sequences are unique but not
contiguous, which leaves room to insert between neighbours.
"""

from datetime import datetime

from pydantic import field_validator

from agora.domain.error import ActionItemContentError, ActionItemSequenceError
from agora.domain.model.common import AggregateRoot
from agora.domain.value import ActionItemId, ActionStatus, TalkSessionId

CONTENT_MAX_LENGTH = 40


class ActionItem(AggregateRoot):
    """A post-session action log entry."""

    id: ActionItemId
    talk_session_id: TalkSessionId
    sequence: int
    content: str
    status: ActionStatus
    created_at: datetime
    updated_at: datetime

    @field_validator("sequence")
    @classmethod
    def validate_sequence(cls, v: int) -> int:
        if v < 0:
            raise ActionItemSequenceError(v)
        return v

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not 1 <= len(v) <= CONTENT_MAX_LENGTH:
            raise ActionItemContentError(len(v))
        return v

    def update_content(self, content: str, now: datetime) -> None:
        self.content = content
        self.updated_at = now

    def update_status(self, status: ActionStatus, now: datetime) -> None:
        self.status = status
        self.updated_at = now
