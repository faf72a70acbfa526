"""Analysis report routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from agora.application.usecase.analysis import (
    ApplyFeedbackRequest,
    ApplyFeedbackResponse,
    ApplyFeedbackUseCase,
)
from agora.interface.api.dependencies import current_user_id

router = APIRouter(prefix="/analysis", tags=["analysis"], route_class=DishkaRoute)


class FeedbackBody(BaseModel):
    feedback_type: str  # "good" | "bad"


@router.post("/reports/{report_id}/feedback", response_model=ApplyFeedbackResponse)
async def apply_feedback(
    report_id: str,
    body: FeedbackBody,
    use_case: FromDishka[ApplyFeedbackUseCase],
    user_id: str = Depends(current_user_id),
) -> ApplyFeedbackResponse:
    """Rate a generated report. One rating per user."""
    return await use_case.execute(
        ApplyFeedbackRequest(
            report_id=report_id, user_id=user_id, feedback_type=body.feedback_type
        )
    )
