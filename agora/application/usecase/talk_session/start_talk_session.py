"""Start talk session use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from agora.config import TalkSessionSettings
from agora.domain.clock import Clock
from agora.domain.error import OrganizationRequiredError, UserNotFoundError
from agora.domain.model.location import Location
from agora.domain.model.talk_session import TalkSession
from agora.domain.repository import (
    DomainEventRepository,
    TalkSessionRepository,
    TransactionManager,
    UserRepository,
)
from agora.domain.value import UserId, parse_id


class LocationPayload(BaseModel):
    latitude: float
    longitude: float


class StartTalkSessionRequest(BaseModel):
    """Start talk session request."""

    owner_id: str  # User ID from authenticated user
    theme: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    scheduled_end_time: datetime
    location: Optional[LocationPayload] = None
    city: Optional[str] = None
    prefecture: Optional[str] = None
    restrictions: list[str] = []
    show_top: bool = True


class TalkSessionResponse(BaseModel):
    """Talk session as returned by the session use cases."""

    talk_session_id: str
    owner_id: str
    theme: str
    description: Optional[str]
    thumbnail_url: Optional[str]
    scheduled_end_time: datetime
    created_at: datetime
    location: Optional[LocationPayload]
    city: Optional[str]
    prefecture: Optional[str]
    restrictions: list[str]
    hide_report: bool
    show_top: bool

    @classmethod
    def from_model(cls, talk_session: TalkSession) -> "TalkSessionResponse":
        location = talk_session.location
        return cls(
            talk_session_id=str(talk_session.id),
            owner_id=str(talk_session.owner_id),
            theme=talk_session.theme,
            description=talk_session.description,
            thumbnail_url=talk_session.thumbnail_url,
            scheduled_end_time=talk_session.scheduled_end_time,
            created_at=talk_session.created_at,
            location=(
                LocationPayload(latitude=location.latitude, longitude=location.longitude)
                if location
                else None
            ),
            city=talk_session.city,
            prefecture=talk_session.prefecture,
            restrictions=[key.value for key in talk_session.restrictions],
            hide_report=talk_session.hide_report,
            show_top=talk_session.show_top,
        )


class StartTalkSessionUseCase:
    """Use case for opening a new talk session."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        user_repository: UserRepository,
        event_repository: DomainEventRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
        settings: TalkSessionSettings,
    ) -> None:
        """Initialize start talk session use case.

        Args:
            talk_session_repository: Talk session repository
            user_repository: User repository
            event_repository: Domain event store
            transaction_manager: Unit of work
            clock: Time source
            settings: Talk session policy
        """
        self.talk_session_repository = talk_session_repository
        self.user_repository = user_repository
        self.event_repository = event_repository
        self.transaction_manager = transaction_manager
        self.clock = clock
        self.settings = settings

    async def execute(self, request: StartTalkSessionRequest) -> TalkSessionResponse:
        """Execute start talk session flow.

        Steps:
        1. Load the owner and apply the organization policy
        2. Build the session, validating every field
        3. Record the start event
        4. Store the session and its events in one transaction

        Args:
            request: Start talk session request

        Returns:
            The created talk session

        Raises:
            UserNotFoundError: If the owner does not exist
            OrganizationRequiredError: If policy requires an organization
            TalkSessionThemeError: If the theme length is out of range
            TalkSessionDescriptionError: If the description is too long
            InvalidScheduledEndTimeError: If the end time is not in the future
            InvalidRestrictionAttributeError: Listing every unknown key
        """
        owner_id = UserId(parse_id(request.owner_id, "owner_id"))

        with logfire.span("start_talk_session", owner_id=str(owner_id)):
            owner = await self.user_repository.find_by_id(owner_id)
            if owner is None:
                raise UserNotFoundError(owner_id)

            if self.settings.require_organization and not owner.belongs_to_organization:
                logfire.warn(
                    "Talk session rejected: owner has no organization",
                    owner_id=str(owner_id),
                )
                raise OrganizationRequiredError(owner_id)

            now = self.clock.now()
            talk_session = TalkSession.create(
                theme=request.theme,
                owner_id=owner_id,
                scheduled_end_time=request.scheduled_end_time,
                now=now,
                description=request.description,
                thumbnail_url=request.thumbnail_url,
                location=(
                    Location(
                        latitude=request.location.latitude,
                        longitude=request.location.longitude,
                    )
                    if request.location
                    else None
                ),
                city=request.city,
                prefecture=request.prefecture,
                restrictions=request.restrictions,
            )
            talk_session.change_show_top(request.show_top)
            talk_session.start_session(now)
            events = talk_session.pull_events()

            async with self.transaction_manager.transaction():
                talk_session = await self.talk_session_repository.create(talk_session)
                await self.event_repository.append(events)

            logfire.info(
                "Talk session started",
                talk_session_id=str(talk_session.id),
                owner_id=str(owner_id),
                restrictions=[key.value for key in talk_session.restrictions],
            )

            return TalkSessionResponse.from_model(talk_session)
