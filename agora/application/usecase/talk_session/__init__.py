"""Talk session use cases."""

from .check_restrictions import (
    CheckRestrictionsRequest,
    CheckRestrictionsResponse,
    CheckRestrictionsUseCase,
)
from .add_conclusion import (
    AddConclusionRequest,
    AddConclusionResponse,
    AddConclusionUseCase,
)
from .edit_talk_session import EditTalkSessionRequest, EditTalkSessionUseCase
from .process_ended_talk_sessions import (
    ProcessEndedTalkSessionsResponse,
    ProcessEndedTalkSessionsUseCase,
)
from .start_talk_session import (
    LocationPayload,
    StartTalkSessionRequest,
    StartTalkSessionUseCase,
    TalkSessionResponse,
)
from .take_consent import TakeConsentRequest, TakeConsentResponse, TakeConsentUseCase

__all__ = [
    "CheckRestrictionsRequest",
    "CheckRestrictionsResponse",
    "CheckRestrictionsUseCase",
    "AddConclusionRequest",
    "AddConclusionResponse",
    "AddConclusionUseCase",
    "EditTalkSessionRequest",
    "EditTalkSessionUseCase",
    "LocationPayload",
    "ProcessEndedTalkSessionsResponse",
    "ProcessEndedTalkSessionsUseCase",
    "StartTalkSessionRequest",
    "StartTalkSessionUseCase",
    "TakeConsentRequest",
    "TakeConsentResponse",
    "TakeConsentUseCase",
    "TalkSessionResponse",
]
