"""Talk session routes."""

from datetime import datetime
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from agora.application.usecase.talk_session import (
    AddConclusionRequest,
    AddConclusionResponse,
    AddConclusionUseCase,
    CheckRestrictionsRequest,
    CheckRestrictionsResponse,
    CheckRestrictionsUseCase,
    EditTalkSessionRequest,
    EditTalkSessionUseCase,
    LocationPayload,
    StartTalkSessionRequest,
    StartTalkSessionUseCase,
    TakeConsentRequest,
    TakeConsentResponse,
    TakeConsentUseCase,
    TalkSessionResponse,
)
from agora.application.usecase.timeline import (
    ActionItemResponse,
    AddActionItemRequest,
    AddActionItemUseCase,
    EditActionItemRequest,
    EditActionItemUseCase,
)
from agora.interface.api.dependencies import current_user_id

router = APIRouter(prefix="/talksessions", tags=["talk_sessions"], route_class=DishkaRoute)


class StartTalkSessionBody(BaseModel):
    theme: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    scheduled_end_time: datetime
    location: Optional[LocationPayload] = None
    city: Optional[str] = None
    prefecture: Optional[str] = None
    restrictions: list[str] = []
    show_top: bool = True


class EditTalkSessionBody(BaseModel):
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


class ConclusionBody(BaseModel):
    content: str


class AddActionItemBody(BaseModel):
    parent_action_item_id: Optional[str] = None
    content: str
    status: str


class EditActionItemBody(BaseModel):
    content: Optional[str] = None
    status: Optional[str] = None


@router.post(
    "", response_model=TalkSessionResponse, status_code=status.HTTP_201_CREATED
)
async def start_talk_session(
    body: StartTalkSessionBody,
    use_case: FromDishka[StartTalkSessionUseCase],
    user_id: str = Depends(current_user_id),
) -> TalkSessionResponse:
    """Open a new talk session owned by the caller."""
    return await use_case.execute(
        StartTalkSessionRequest(owner_id=user_id, **body.model_dump())
    )


@router.put("/{talk_session_id}", response_model=TalkSessionResponse)
async def edit_talk_session(
    talk_session_id: str,
    body: EditTalkSessionBody,
    use_case: FromDishka[EditTalkSessionUseCase],
    user_id: str = Depends(current_user_id),
) -> TalkSessionResponse:
    """Change a talk session. Owner only."""
    return await use_case.execute(
        EditTalkSessionRequest(
            talk_session_id=talk_session_id,
            user_id=user_id,
            **body.model_dump(exclude_unset=True),
        )
    )


@router.get(
    "/{talk_session_id}/restrictions", response_model=CheckRestrictionsResponse
)
async def check_restrictions(
    talk_session_id: str,
    use_case: FromDishka[CheckRestrictionsUseCase],
    user_id: str = Depends(current_user_id),
) -> CheckRestrictionsResponse:
    """Profile fields the caller still has to fill in to take part."""
    return await use_case.execute(
        CheckRestrictionsRequest(talk_session_id=talk_session_id, user_id=user_id)
    )


@router.post(
    "/{talk_session_id}/consent",
    response_model=TakeConsentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def take_consent(
    talk_session_id: str,
    use_case: FromDishka[TakeConsentUseCase],
    user_id: str = Depends(current_user_id),
) -> TakeConsentResponse:
    """Accept the session's participation restrictions."""
    return await use_case.execute(
        TakeConsentRequest(talk_session_id=talk_session_id, user_id=user_id)
    )


@router.post(
    "/{talk_session_id}/conclusion",
    response_model=AddConclusionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_conclusion(
    talk_session_id: str,
    body: ConclusionBody,
    use_case: FromDishka[AddConclusionUseCase],
    user_id: str = Depends(current_user_id),
) -> AddConclusionResponse:
    """Write the closing summary of a finished session. Owner only."""
    return await use_case.execute(
        AddConclusionRequest(
            talk_session_id=talk_session_id, user_id=user_id, content=body.content
        )
    )


@router.post(
    "/{talk_session_id}/timelines",
    response_model=ActionItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_action_item(
    talk_session_id: str,
    body: AddActionItemBody,
    use_case: FromDishka[AddActionItemUseCase],
    user_id: str = Depends(current_user_id),
) -> ActionItemResponse:
    """Add a timeline entry, after ``parent_action_item_id`` when given."""
    return await use_case.execute(
        AddActionItemRequest(
            talk_session_id=talk_session_id, owner_id=user_id, **body.model_dump()
        )
    )


@router.put(
    "/{talk_session_id}/timelines/{action_item_id}",
    response_model=ActionItemResponse,
)
async def edit_action_item(
    talk_session_id: str,
    action_item_id: str,
    body: EditActionItemBody,
    use_case: FromDishka[EditActionItemUseCase],
    user_id: str = Depends(current_user_id),
) -> ActionItemResponse:
    return await use_case.execute(
        EditActionItemRequest(
            talk_session_id=talk_session_id,
            owner_id=user_id,
            action_item_id=action_item_id,
            **body.model_dump(),
        )
    )
