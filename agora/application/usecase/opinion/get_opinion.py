"""Get opinion use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from agora.domain.error import OpinionNotFoundError
from agora.domain.model.opinion import Opinion
from agora.domain.repository import ReportRepository
from agora.domain.service import OpinionService
from agora.domain.value import OpinionId, ReportStatus, UserId, VoteType, parse_id


class GetOpinionRequest(BaseModel):
    opinion_id: str  # UUID string
    viewer_id: Optional[str] = None  # Caller, when signed in


class OpinionView(BaseModel):
    opinion_id: str
    talk_session_id: str
    parent_opinion_id: Optional[str]
    author_id: Optional[str]
    title: Optional[str]
    content: str
    reference_url: Optional[str]
    reference_image_url: Optional[str]
    created_at: datetime
    vote_status: Optional[str]  # Viewer's own vote
    is_deleted: bool

    @classmethod
    def from_opinion(cls, opinion: Opinion) -> "OpinionView":
        return cls(
            opinion_id=str(opinion.id),
            talk_session_id=str(opinion.talk_session_id),
            parent_opinion_id=(
                str(opinion.parent_opinion_id) if opinion.parent_opinion_id else None
            ),
            author_id=str(opinion.author_id) if opinion.author_id else None,
            title=opinion.title,
            content=opinion.content,
            reference_url=opinion.reference_url,
            reference_image_url=opinion.reference_image_url,
            created_at=opinion.created_at,
            vote_status=(
                opinion.vote_status.label
                if opinion.vote_status is not VoteType.UNVOTED
                else None
            ),
            is_deleted=opinion.is_deleted,
        )


class GetOpinionResponse(BaseModel):
    opinion: OpinionView
    reply_count: int
    replies: list[OpinionView]


class GetOpinionUseCase:
    """Reads an opinion and its direct replies.

    Opinions whose reports were resolved to ``deleted`` come back masked.
    """

    def __init__(
        self, opinion_service: OpinionService, report_repository: ReportRepository
    ) -> None:
        self.opinion_service = opinion_service
        self.report_repository = report_repository

    async def execute(self, request: GetOpinionRequest) -> GetOpinionResponse:
        """
        Raises:
            OpinionNotFoundError: If the opinion does not exist
        """
        opinion_id = OpinionId(parse_id(request.opinion_id, "opinion_id"))
        viewer_id = (
            UserId(parse_id(request.viewer_id, "viewer_id"))
            if request.viewer_id
            else None
        )

        opinion = await self.opinion_service.get_with_replies(opinion_id, viewer_id)
        if opinion is None:
            raise OpinionNotFoundError(opinion_id)

        replies = [await self._moderated(reply) for reply in opinion.replies]
        opinion = await self._moderated(opinion)

        return GetOpinionResponse(
            opinion=OpinionView.from_opinion(opinion),
            reply_count=opinion.count(),
            replies=[OpinionView.from_opinion(reply) for reply in replies],
        )

    async def _moderated(self, opinion: Opinion) -> Opinion:
        reports = await self.report_repository.find_by_opinion_id(opinion.id)
        deleted = [r for r in reports if r.status is ReportStatus.DELETED]
        return opinion.mask(deleted)
