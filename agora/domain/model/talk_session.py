"""TalkSession aggregate root.

A talk session is a scheduled discussion topic. It finishes purely by
wall-clock comparison against its scheduled end time; explicit start and
end transitions only record domain events for downstream processing.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field, PrivateAttr, field_validator

from agora.domain.error import (
    InvalidScheduledEndTimeError,
    SessionAlreadyEndedError,
    SessionAlreadyStartedError,
    TalkSessionDescriptionError,
    TalkSessionNotFinishedError,
    TalkSessionThemeError,
)
from agora.domain.model.common import AggregateRoot
from agora.domain.model.event import DomainEvent, TalkSessionEnded, TalkSessionStarted
from agora.domain.model.location import Location
from agora.domain.model.restriction import RestrictionAttribute, restriction_attribute
from agora.domain.value import RestrictionAttributeKey, TalkSessionId, UserId

THEME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 40000


class TalkSession(AggregateRoot):
    """TalkSession aggregate root.

    Business rules:
    - Theme is 1-100 characters, description at most 40000
    - Scheduled end time is in the future whenever it is set
    - Restrictions come from a closed set of attribute keys
    - A finished session accepts no further votes
    """

    id: TalkSessionId
    owner_id: UserId
    theme: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    location: Optional[Location] = None
    city: Optional[str] = None
    prefecture: Optional[str] = None
    scheduled_end_time: datetime
    created_at: datetime
    restrictions: list[RestrictionAttributeKey] = Field(default_factory=list)
    hide_report: bool = False
    show_top: bool = True
    end_processed: bool = False

    _events: list[DomainEvent] = PrivateAttr(default_factory=list)

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        if not 1 <= len(v) <= THEME_MAX_LENGTH:
            raise TalkSessionThemeError(len(v))
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
            raise TalkSessionDescriptionError(len(v))
        return v

    @classmethod
    def create(
        cls,
        theme: str,
        owner_id: UserId,
        scheduled_end_time: datetime,
        now: datetime,
        description: Optional[str] = None,
        thumbnail_url: Optional[str] = None,
        location: Optional[Location] = None,
        city: Optional[str] = None,
        prefecture: Optional[str] = None,
        restrictions: Optional[list[str]] = None,
    ) -> "TalkSession":
        """Open a new talk session.

        Args:
            theme: Discussion topic
            owner_id: User opening the session
            scheduled_end_time: When the session finishes
            now: Current time
            description: Optional long-form description
            thumbnail_url: Optional image URL
            location: Optional coordinates
            city: Optional city name
            prefecture: Optional prefecture name
            restrictions: Optional restriction attribute keys

        Returns:
            New talk session

        Raises:
            InvalidScheduledEndTimeError: If the end time is not in the future
            InvalidRestrictionAttributeError: Listing every unknown key
        """
        if scheduled_end_time <= now:
            raise InvalidScheduledEndTimeError()

        session = cls(
            id=TalkSessionId(uuid4()),
            owner_id=owner_id,
            theme=theme,
            description=description,
            thumbnail_url=thumbnail_url,
            location=location,
            city=city,
            prefecture=prefecture,
            scheduled_end_time=scheduled_end_time,
            created_at=now,
        )
        if restrictions:
            session.update_restrictions(restrictions)
        return session

    def is_finished(self, now: datetime) -> bool:
        return self.scheduled_end_time < now

    def is_owner(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def update_restrictions(self, keys: list[str]) -> None:
        """Replace the restriction list.

        Empty strings are ignored. Nothing changes if any key is unknown.

        Raises:
            InvalidRestrictionAttributeError: Listing every unknown key
        """
        self.restrictions = RestrictionAttributeKey.parse_all(keys)

    def restriction_attributes(self) -> list[RestrictionAttribute]:
        return [restriction_attribute(key) for key in self.restrictions]

    @property
    def has_restrictions(self) -> bool:
        return bool(self.restrictions)

    # Setters. Field validators run on every assignment.

    def change_theme(self, theme: str) -> None:
        self.theme = theme

    def change_description(self, description: Optional[str]) -> None:
        self.description = description

    def change_thumbnail_url(self, thumbnail_url: Optional[str]) -> None:
        self.thumbnail_url = thumbnail_url

    def change_scheduled_end_time(self, scheduled_end_time: datetime, now: datetime) -> None:
        if scheduled_end_time <= now:
            raise InvalidScheduledEndTimeError()
        self.scheduled_end_time = scheduled_end_time

    def change_location(self, location: Optional[Location]) -> None:
        self.location = location

    def change_city(self, city: Optional[str]) -> None:
        self.city = city

    def change_prefecture(self, prefecture: Optional[str]) -> None:
        self.prefecture = prefecture

    def change_show_top(self, show_top: bool) -> None:
        self.show_top = show_top

    def set_report_visibility(self, hide_report: bool) -> None:
        self.hide_report = hide_report

    # Lifecycle events

    def start_session(self, now: datetime) -> None:
        """Record that the session has opened.

        Raises:
            SessionAlreadyStartedError: If already recorded on this instance
        """
        if any(isinstance(e, TalkSessionStarted) for e in self._events):
            raise SessionAlreadyStartedError(self.id)

        self._events.append(
            TalkSessionStarted(
                aggregate_id=self.id,
                occurred_at=now,
                talk_session_id=self.id,
                owner_id=self.owner_id,
                theme=self.theme,
                description=self.description or "",
                scheduled_end_time=self.scheduled_end_time,
            )
        )

    def end_session(self, participant_ids: list[UserId], now: datetime) -> None:
        """Close a finished session and record who took part.

        Raises:
            TalkSessionNotFinishedError: If the end time has not passed
            SessionAlreadyEndedError: If end processing already ran
        """
        if self.end_processed:
            raise SessionAlreadyEndedError(self.id)
        if not self.is_finished(now):
            raise TalkSessionNotFinishedError(self.id)

        self.end_processed = True
        self._events.append(
            TalkSessionEnded(
                aggregate_id=self.id,
                occurred_at=now,
                talk_session_id=self.id,
                owner_id=self.owner_id,
                theme=self.theme,
                participant_ids=list(participant_ids),
            )
        )

    def pull_events(self) -> list[DomainEvent]:
        """Return recorded events and clear them."""
        events, self._events = self._events, []
        return events
