"""Vote entity.

Each participant casts at most one vote per opinion. The rule is checked
before insert and enforced by a unique constraint on (opinion_id, user_id).
"""

from datetime import datetime
from uuid import uuid4

from pydantic import field_validator

from agora.domain.error import VoteUnvoteNotAllowedError
from agora.domain.model.common import DomainModel
from agora.domain.value import OpinionId, TalkSessionId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """A participant's choice on an opinion."""

    id: VoteId
    opinion_id: OpinionId
    talk_session_id: TalkSessionId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime

    @field_validator("vote_type")
    @classmethod
    def validate_vote_type(cls, v: VoteType) -> VoteType:
        if v is VoteType.UNVOTED:
            raise VoteUnvoteNotAllowedError()
        return v

    @classmethod
    def cast(
        cls,
        opinion_id: OpinionId,
        talk_session_id: TalkSessionId,
        user_id: UserId,
        vote_type: VoteType,
        now: datetime,
    ) -> "Vote":
        return cls(
            id=VoteId(uuid4()),
            opinion_id=opinion_id,
            talk_session_id=talk_session_id,
            user_id=user_id,
            vote_type=vote_type,
            created_at=now,
        )

    def change_vote_type(self, vote_type: VoteType) -> "Vote":
        """Return a corrected copy of this vote (administrative path only)."""
        return Vote(**{**self.model_dump(), "vote_type": vote_type})
