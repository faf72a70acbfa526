"""Shared gate for timeline writes."""

from datetime import datetime

from agora.domain.error import (
    TalkSessionNotFinishedError,
    TalkSessionNotFoundError,
    TalkSessionNotOwnerError,
)
from agora.domain.model.talk_session import TalkSession
from agora.domain.repository import TalkSessionRepository
from agora.domain.value import TalkSessionId, UserId


async def load_finished_owned_session(
    talk_session_repository: TalkSessionRepository,
    talk_session_id: TalkSessionId,
    owner_id: UserId,
    now: datetime,
) -> TalkSession:
    """Load a session the caller owns and that has already finished.

    Raises:
        TalkSessionNotFoundError: If the session does not exist
        TalkSessionNotFinishedError: If the session is still running
        TalkSessionNotOwnerError: If the caller is not the owner
    """
    talk_session = await talk_session_repository.find_by_id(talk_session_id)
    if talk_session is None:
        raise TalkSessionNotFoundError(talk_session_id)
    if not talk_session.is_finished(now):
        raise TalkSessionNotFinishedError(talk_session_id)
    if not talk_session.is_owner(owner_id):
        raise TalkSessionNotOwnerError(talk_session_id, owner_id)
    return talk_session
