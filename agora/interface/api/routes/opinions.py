"""Opinion routes: reading, posting, voting and moderation."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import Base64Bytes, BaseModel

from agora.application.usecase.opinion import (
    GetOpinionRequest,
    GetOpinionResponse,
    GetOpinionUseCase,
    GetReportSummaryRequest,
    GetReportSummaryResponse,
    GetReportSummaryUseCase,
    ReportOpinionRequest,
    ReportOpinionResponse,
    ReportOpinionUseCase,
    SolveReportRequest,
    SolveReportResponse,
    SolveReportUseCase,
    SubmitOpinionRequest,
    SubmitOpinionResponse,
    SubmitOpinionUseCase,
)
from agora.application.usecase.vote import VoteRequest, VoteResponse, VoteUseCase
from agora.interface.api.dependencies import current_user_id, optional_user_id

router = APIRouter(prefix="/opinions", tags=["opinions"], route_class=DishkaRoute)


class SubmitOpinionBody(BaseModel):
    talk_session_id: Optional[str] = None
    parent_opinion_id: Optional[str] = None
    title: Optional[str] = None
    content: str
    reference_url: Optional[str] = None
    picture: Optional[Base64Bytes] = None  # Base64-encoded image


class VoteBody(BaseModel):
    vote_type: str


class ReportBody(BaseModel):
    reason: int
    reason_text: Optional[str] = None


class SolveReportBody(BaseModel):
    status: str


@router.post(
    "", response_model=SubmitOpinionResponse, status_code=status.HTTP_201_CREATED
)
async def submit_opinion(
    body: SubmitOpinionBody,
    use_case: FromDishka[SubmitOpinionUseCase],
    user_id: str = Depends(current_user_id),
) -> SubmitOpinionResponse:
    """Post an opinion, or a reply when ``parent_opinion_id`` is set.

    The author's own agree vote is recorded with it.
    """
    return await use_case.execute(
        SubmitOpinionRequest(author_id=user_id, **body.model_dump())
    )


@router.get("/{opinion_id}", response_model=GetOpinionResponse)
async def get_opinion(
    opinion_id: str,
    use_case: FromDishka[GetOpinionUseCase],
    viewer_id: str | None = Depends(optional_user_id),
) -> GetOpinionResponse:
    """An opinion with its direct replies. Removed opinions are masked."""
    return await use_case.execute(
        GetOpinionRequest(opinion_id=opinion_id, viewer_id=viewer_id)
    )


@router.post(
    "/{opinion_id}/votes",
    response_model=VoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vote(
    opinion_id: str,
    body: VoteBody,
    use_case: FromDishka[VoteUseCase],
    user_id: str = Depends(current_user_id),
) -> VoteResponse:
    """Vote agree, disagree or pass on an opinion. One vote per user."""
    return await use_case.execute(
        VoteRequest(opinion_id=opinion_id, user_id=user_id, vote_type=body.vote_type)
    )


@router.post(
    "/{opinion_id}/reports",
    response_model=ReportOpinionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def report_opinion(
    opinion_id: str,
    body: ReportBody,
    use_case: FromDishka[ReportOpinionUseCase],
    user_id: str = Depends(current_user_id),
) -> ReportOpinionResponse:
    return await use_case.execute(
        ReportOpinionRequest(
            opinion_id=opinion_id,
            reporter_id=user_id,
            reason=body.reason,
            reason_text=body.reason_text,
        )
    )


@router.get("/{opinion_id}/reports", response_model=GetReportSummaryResponse)
async def get_report_summary(
    opinion_id: str,
    use_case: FromDishka[GetReportSummaryUseCase],
    user_id: str = Depends(current_user_id),
) -> GetReportSummaryResponse:
    """Reports on an opinion grouped by reason. Session owner only."""
    return await use_case.execute(
        GetReportSummaryRequest(opinion_id=opinion_id, user_id=user_id)
    )


@router.post("/{opinion_id}/reports/solve", response_model=SolveReportResponse)
async def solve_report(
    opinion_id: str,
    body: SolveReportBody,
    use_case: FromDishka[SolveReportUseCase],
    user_id: str = Depends(current_user_id),
) -> SolveReportResponse:
    """Move every report on an opinion to a new status. Session owner only."""
    return await use_case.execute(
        SolveReportRequest(opinion_id=opinion_id, user_id=user_id, status=body.status)
    )
