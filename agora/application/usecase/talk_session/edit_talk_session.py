"""Edit talk session use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.error import TalkSessionNotFoundError, TalkSessionNotOwnerError
from agora.domain.model.location import Location
from agora.domain.repository import TalkSessionRepository, TransactionManager
from agora.domain.value import TalkSessionId, UserId, parse_id

from .start_talk_session import LocationPayload, TalkSessionResponse


class EditTalkSessionRequest(BaseModel):
    """Edit talk session request.

    Fields left as None are not changed.
    """

    talk_session_id: str  # UUID string
    user_id: str  # Owner ID from authenticated user
    theme: Optional[str] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    scheduled_end_time: Optional[datetime] = None
    location: Optional[LocationPayload] = None
    city: Optional[str] = None
    prefecture: Optional[str] = None
    restrictions: Optional[list[str]] = None
    hide_report: Optional[bool] = None
    show_top: Optional[bool] = None


class EditTalkSessionUseCase:
    """Use case for the owner changing a talk session."""

    def __init__(
        self,
        talk_session_repository: TalkSessionRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self.talk_session_repository = talk_session_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: EditTalkSessionRequest) -> TalkSessionResponse:
        """Apply the requested changes and store the session.

        All changes are validated before anything is stored.

        Raises:
            TalkSessionNotFoundError: If the session does not exist
            TalkSessionNotOwnerError: If the caller is not the owner
            InvalidScheduledEndTimeError: If a new end time is not in the future
            InvalidRestrictionAttributeError: Listing every unknown key
        """
        talk_session_id = TalkSessionId(
            parse_id(request.talk_session_id, "talk_session_id")
        )
        user_id = UserId(parse_id(request.user_id, "user_id"))

        with logfire.span("edit_talk_session", talk_session_id=str(talk_session_id)):
            talk_session = await self.talk_session_repository.find_by_id(
                talk_session_id
            )
            if talk_session is None:
                raise TalkSessionNotFoundError(talk_session_id)
            if not talk_session.is_owner(user_id):
                raise TalkSessionNotOwnerError(talk_session_id, user_id)

            if request.theme is not None:
                talk_session.change_theme(request.theme)
            if request.description is not None:
                talk_session.change_description(request.description)
            if request.thumbnail_url is not None:
                talk_session.change_thumbnail_url(request.thumbnail_url)
            if request.scheduled_end_time is not None:
                talk_session.change_scheduled_end_time(
                    request.scheduled_end_time, self.clock.now()
                )
            if request.location is not None:
                talk_session.change_location(
                    Location(
                        latitude=request.location.latitude,
                        longitude=request.location.longitude,
                    )
                )
            if request.city is not None:
                talk_session.change_city(request.city)
            if request.prefecture is not None:
                talk_session.change_prefecture(request.prefecture)
            if request.restrictions is not None:
                talk_session.update_restrictions(request.restrictions)
            if request.hide_report is not None:
                talk_session.set_report_visibility(request.hide_report)
            if request.show_top is not None:
                talk_session.change_show_top(request.show_top)

            async with self.transaction_manager.transaction():
                talk_session = await self.talk_session_repository.update(talk_session)

            logfire.info("Talk session edited", talk_session_id=str(talk_session_id))

            return TalkSessionResponse.from_model(talk_session)
