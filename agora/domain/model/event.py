"""Domain events recorded by aggregates."""

from datetime import datetime
from typing import Any, ClassVar
from uuid import UUID, uuid4

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import TalkSessionId, UserId


class DomainEvent(DomainModel):
    """Something that happened to an aggregate.

    Events are appended to the aggregate while it is changed and pulled
    by the use case for persistence after the change is saved.
    """

    event_type: ClassVar[str] = "domain.event"
    aggregate_type: ClassVar[str] = "Aggregate"

    id: UUID = Field(default_factory=uuid4)
    aggregate_id: UUID
    occurred_at: datetime

    def payload(self) -> dict[str, Any]:
        """Event body without the envelope fields."""
        return self.model_dump(
            mode="json", exclude={"id", "aggregate_id", "occurred_at"}
        )


class TalkSessionStarted(DomainEvent):
    event_type: ClassVar[str] = "talksession.started"
    aggregate_type: ClassVar[str] = "TalkSession"

    talk_session_id: TalkSessionId
    owner_id: UserId
    theme: str
    description: str = ""
    scheduled_end_time: datetime


class TalkSessionEnded(DomainEvent):
    event_type: ClassVar[str] = "talksession.ended"
    aggregate_type: ClassVar[str] = "TalkSession"

    talk_session_id: TalkSessionId
    owner_id: UserId
    theme: str
    participant_ids: list[UserId] = Field(default_factory=list)
