"""Talk session consent."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import RestrictionAttributeKey, TalkSessionId, UserId


class TalkSessionConsent(DomainModel):
    """A participant's acknowledgment of a session's restrictions.

    At most one consent exists per (talk_session_id, user_id).
    """

    talk_session_id: TalkSessionId
    user_id: UserId
    consented_at: datetime
    restrictions: list[RestrictionAttributeKey] = Field(min_length=1)
