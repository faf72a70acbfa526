"""Check restrictions use case."""

from pydantic import BaseModel

from agora.domain.service import TalkSessionAccessControl
from agora.domain.value import TalkSessionId, UserId, parse_id


class CheckRestrictionsRequest(BaseModel):
    talk_session_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RestrictionView(BaseModel):
    key: str
    description: str


class CheckRestrictionsResponse(BaseModel):
    satisfied: bool
    unsatisfied: list[RestrictionView]


class CheckRestrictionsUseCase:
    """Tells a user which profile fields they still need to join a session."""

    def __init__(self, access_control: TalkSessionAccessControl) -> None:
        self.access_control = access_control

    async def execute(
        self, request: CheckRestrictionsRequest
    ) -> CheckRestrictionsResponse:
        """
        Raises:
            TalkSessionNotFoundError: If the session does not exist
            UserNotFoundError: If the user does not exist
        """
        talk_session_id = TalkSessionId(
            parse_id(request.talk_session_id, "talk_session_id")
        )
        user_id = UserId(parse_id(request.user_id, "user_id"))

        missing = await self.access_control.unsatisfied_restrictions(
            talk_session_id, user_id
        )
        return CheckRestrictionsResponse(
            satisfied=not missing,
            unsatisfied=[
                RestrictionView(key=attr.key.value, description=attr.description)
                for attr in missing
            ],
        )
