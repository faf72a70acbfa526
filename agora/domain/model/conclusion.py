"""Talk session conclusion written by the owner after the session ends."""

from datetime import datetime

from pydantic import field_validator

from agora.domain.error import ConclusionContentError
from agora.domain.model.common import DomainModel
from agora.domain.value import TalkSessionId, UserId

CONTENT_MAX_LENGTH = 40000


class Conclusion(DomainModel):
    """Owner's closing summary. One per talk session."""

    talk_session_id: TalkSessionId
    content: str
    created_by: UserId
    created_at: datetime

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not 1 <= len(v) <= CONTENT_MAX_LENGTH:
            raise ConclusionContentError(len(v))
        return v
