"""Submit opinion use case."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import BaseModel

from agora.domain.clock import Clock
from agora.domain.error import (
    OpinionNotFoundError,
    OpinionTalkSessionRequiredError,
    TalkSessionIsFinishedError,
    TalkSessionNotFoundError,
)
from agora.domain.model.image import REFERENCE_IMAGE_RULE, reference_image_key
from agora.domain.model.opinion import Opinion
from agora.domain.model.vote import Vote
from agora.domain.repository import (
    OpinionRepository,
    TalkSessionRepository,
    TransactionManager,
    VoteRepository,
)
from agora.domain.service import ImageInspector, ImageStorage, TalkSessionAccessControl
from agora.domain.value import OpinionId, TalkSessionId, UserId, VoteType, parse_id


class SubmitOpinionRequest(BaseModel):
    """Submit opinion request."""

    talk_session_id: Optional[str] = None  # UUID string; inferred from parent
    parent_opinion_id: Optional[str] = None  # UUID string
    author_id: str  # User ID from authenticated user
    title: Optional[str] = None
    content: str
    reference_url: Optional[str] = None
    picture: Optional[bytes] = None  # Raw image bytes


class SubmitOpinionResponse(BaseModel):
    """Submit opinion response."""

    opinion_id: str
    talk_session_id: str
    parent_opinion_id: Optional[str]
    author_id: str
    title: Optional[str]
    content: str
    reference_url: Optional[str]
    reference_image_url: Optional[str]
    created_at: datetime


class SubmitOpinionUseCase:
    """Use case for posting an opinion or a reply."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        talk_session_repository: TalkSessionRepository,
        vote_repository: VoteRepository,
        access_control: TalkSessionAccessControl,
        image_inspector: ImageInspector,
        image_storage: ImageStorage,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize submit opinion use case.

        Args:
            opinion_repository: Opinion repository
            talk_session_repository: Talk session repository
            vote_repository: Vote repository
            access_control: Talk session access control
            image_inspector: Decodes attached pictures
            image_storage: Stores attached pictures
            transaction_manager: Unit of work
            clock: Time source
        """
        self.opinion_repository = opinion_repository
        self.talk_session_repository = talk_session_repository
        self.vote_repository = vote_repository
        self.access_control = access_control
        self.image_inspector = image_inspector
        self.image_storage = image_storage
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def execute(self, request: SubmitOpinionRequest) -> SubmitOpinionResponse:
        """Execute submit opinion flow.

        Steps:
        1. Resolve the talk session, directly or through the parent opinion
        2. Reject posts to finished sessions
        3. Check the author may take part in the session
        4. Build the opinion and check any attached picture
        5. In one transaction: upload the picture, store the opinion and
           the author's own agree vote

        Args:
            request: Submit opinion request

        Returns:
            Submitted opinion

        Raises:
            OpinionTalkSessionRequiredError: If neither session nor parent is given
            OpinionNotFoundError: If the parent does not exist in the session
            TalkSessionNotFoundError: If the session does not exist
            TalkSessionIsFinishedError: If the session has finished
            RestrictionNotSatisfiedError: If the author may not take part
            OpinionContentError: If content length is out of range
            ImageValidationError: If the picture breaks the reference image rule
        """
        author_id = UserId(parse_id(request.author_id, "author_id"))
        parent_id = (
            OpinionId(parse_id(request.parent_opinion_id, "parent_opinion_id"))
            if request.parent_opinion_id
            else None
        )
        talk_session_id = (
            TalkSessionId(parse_id(request.talk_session_id, "talk_session_id"))
            if request.talk_session_id
            else None
        )

        with logfire.span("submit_opinion", author_id=str(author_id)):
            if parent_id is not None:
                parent = await self.opinion_repository.find_by_id(parent_id)
                if parent is None:
                    raise OpinionNotFoundError(parent_id)
                if talk_session_id is None:
                    talk_session_id = parent.talk_session_id
                elif parent.talk_session_id != talk_session_id:
                    # A reply lives in its parent's session
                    raise OpinionNotFoundError(parent_id)

            if talk_session_id is None:
                raise OpinionTalkSessionRequiredError()

            talk_session = await self.talk_session_repository.find_by_id(
                talk_session_id
            )
            if talk_session is None:
                raise TalkSessionNotFoundError(talk_session_id)

            now = self.clock.now()
            if talk_session.is_finished(now):
                raise TalkSessionIsFinishedError(talk_session_id)

            await self.access_control.can_user_join(talk_session_id, author_id)

            opinion = Opinion.create(
                talk_session_id=talk_session_id,
                author_id=author_id,
                content=request.content,
                now=now,
                parent_opinion_id=parent_id,
                title=request.title,
                reference_url=request.reference_url,
                opinion_id=OpinionId(uuid4()),
            )

            meta = None
            if request.picture:
                meta = self.image_inspector.inspect(request.picture)
                REFERENCE_IMAGE_RULE.check(meta)

            uploaded_key = None
            try:
                async with self.transaction_manager.transaction():
                    if meta is not None and request.picture:
                        key = reference_image_key(opinion.id, meta, now)
                        url = await self.image_storage.upload(
                            key, meta, request.picture
                        )
                        uploaded_key = key
                        opinion.change_reference_image_url(url)

                    opinion = await self.opinion_repository.create(opinion)
                    await self.vote_repository.create(
                        Vote.cast(
                            opinion_id=opinion.id,
                            talk_session_id=talk_session_id,
                            user_id=author_id,
                            vote_type=VoteType.AGREE,
                            now=now,
                        )
                    )
            except Exception:
                # The rollback does not reach the image store
                if uploaded_key is not None:
                    logfire.warn("Removing image of unsaved opinion", key=uploaded_key)
                    await self.image_storage.delete(uploaded_key)
                raise

            logfire.info(
                "Opinion submitted",
                opinion_id=str(opinion.id),
                talk_session_id=str(talk_session_id),
                is_reply=opinion.is_reply,
            )

            return SubmitOpinionResponse(
                opinion_id=str(opinion.id),
                talk_session_id=str(opinion.talk_session_id),
                parent_opinion_id=(
                    str(opinion.parent_opinion_id) if opinion.parent_opinion_id else None
                ),
                author_id=str(author_id),
                title=opinion.title,
                content=opinion.content,
                reference_url=opinion.reference_url,
                reference_image_url=opinion.reference_image_url,
                created_at=opinion.created_at,
            )
