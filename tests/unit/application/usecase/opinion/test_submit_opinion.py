"""Unit tests for SubmitOpinionUseCase."""

from datetime import timedelta
from unittest.mock import patch
from uuid import UUID, uuid4

import pytest

from agora.adapter.error import ImageStorageError
from agora.adapter.image import FakeImageInspector, InMemoryImageStorage
from agora.application.usecase.opinion import (
    SubmitOpinionRequest,
    SubmitOpinionUseCase,
)
from agora.domain.clock import FixedClock
from agora.domain.error import (
    ImageValidationError,
    OpinionContentError,
    OpinionNotFoundError,
    OpinionTalkSessionRequiredError,
    TalkSessionIsFinishedError,
)
from agora.domain.repository import OpinionRepository, VoteRepository
from agora.domain.value import OpinionId, VoteType
from agora.persistence.repository.inmemory import InMemoryTransactionManager
from tests.conftest import seed_talk_session, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitOpinion:
    @pytest.mark.asyncio
    async def test_submit_records_own_agree_vote(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)

        response = await use_case.execute(
            SubmitOpinionRequest(
                talk_session_id=str(talk_session.id),
                author_id=str(author.id),
                content="Keep the park open at night",
            )
        )

        votes = await vote_repo.find_by_opinion_id(OpinionId(UUID(response.opinion_id)))
        assert [(v.user_id, v.vote_type) for v in votes] == [(author.id, VoteType.AGREE)]
        assert response.parent_opinion_id is None

    @pytest.mark.asyncio
    async def test_reply_inherits_parent_session(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)
        parent = await use_case.execute(
            SubmitOpinionRequest(
                talk_session_id=str(talk_session.id),
                author_id=str(author.id),
                content="Keep the park open at night",
            )
        )

        reply = await use_case.execute(
            SubmitOpinionRequest(
                parent_opinion_id=parent.opinion_id,
                author_id=str(author.id),
                content="Only with better lighting",
            )
        )

        assert reply.talk_session_id == str(talk_session.id)
        assert reply.parent_opinion_id == parent.opinion_id

    @pytest.mark.asyncio
    async def test_reply_to_parent_in_other_session(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        _, session_a = await seed_talk_session(unit_env)
        _, session_b = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)
        parent = await use_case.execute(
            SubmitOpinionRequest(
                talk_session_id=str(session_a.id),
                author_id=str(author.id),
                content="Keep the park open at night",
            )
        )

        with pytest.raises(OpinionNotFoundError):
            await use_case.execute(
                SubmitOpinionRequest(
                    talk_session_id=str(session_b.id),
                    parent_opinion_id=parent.opinion_id,
                    author_id=str(author.id),
                    content="Only with better lighting",
                )
            )

    @pytest.mark.asyncio
    async def test_requires_session_or_parent(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)

        with pytest.raises(OpinionTalkSessionRequiredError):
            await use_case.execute(
                SubmitOpinionRequest(author_id=str(uuid4()), content="An orphan opinion")
            )

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)

        with pytest.raises(OpinionNotFoundError):
            await use_case.execute(
                SubmitOpinionRequest(
                    parent_opinion_id=str(uuid4()),
                    author_id=str(uuid4()),
                    content="Reply to nothing",
                )
            )

    @pytest.mark.asyncio
    async def test_content_too_short(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        opinion_repo = await unit_env.get(OpinionRepository)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)

        with pytest.raises(OpinionContentError):
            await use_case.execute(
                SubmitOpinionRequest(
                    talk_session_id=str(talk_session.id),
                    author_id=str(author.id),
                    content="Meh",
                )
            )
        assert await opinion_repo.find_by_talk_session_id(talk_session.id) == []

    @pytest.mark.asyncio
    async def test_finished_session(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        clock = await unit_env.get(FixedClock)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)
        clock.advance(timedelta(days=2))

        with pytest.raises(TalkSessionIsFinishedError):
            await use_case.execute(
                SubmitOpinionRequest(
                    talk_session_id=str(talk_session.id),
                    author_id=str(author.id),
                    content="Too late to say this",
                )
            )


class TestSubmitOpinionPicture:
    @pytest.mark.asyncio
    async def test_picture_is_uploaded(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        storage = await unit_env.get(InMemoryImageStorage)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)

        response = await use_case.execute(
            SubmitOpinionRequest(
                talk_session_id=str(talk_session.id),
                author_id=str(author.id),
                content="See the attached map",
                picture=b"\x89PNG fake image bytes",
            )
        )

        [key] = storage.objects
        assert key.startswith("ref/")
        assert key.endswith(f"{response.opinion_id}.png")
        assert response.reference_image_url == f"{storage.public_base_url}/{key}"

    @pytest.mark.asyncio
    async def test_disallowed_picture_format(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        inspector = await unit_env.get(FakeImageInspector)
        storage = await unit_env.get(InMemoryImageStorage)
        inspector.mime = "image/gif"
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)

        with pytest.raises(ImageValidationError):
            await use_case.execute(
                SubmitOpinionRequest(
                    talk_session_id=str(talk_session.id),
                    author_id=str(author.id),
                    content="See the attached map",
                    picture=b"GIF89a fake image bytes",
                )
            )
        assert storage.objects == {}

    @pytest.mark.asyncio
    async def test_upload_failure_rolls_back(self, unit_env):
        """Nothing is stored when the picture cannot be saved."""
        use_case = await unit_env.get(SubmitOpinionUseCase)
        storage = await unit_env.get(InMemoryImageStorage)
        opinion_repo = await unit_env.get(OpinionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        transaction_manager = await unit_env.get(InMemoryTransactionManager)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)
        storage.fail_with = ImageStorageError("disk full")

        with pytest.raises(ImageStorageError):
            await use_case.execute(
                SubmitOpinionRequest(
                    talk_session_id=str(talk_session.id),
                    author_id=str(author.id),
                    content="See the attached map",
                    picture=b"\x89PNG fake image bytes",
                )
            )

        assert transaction_manager.rollbacks == 1
        assert await opinion_repo.find_by_talk_session_id(talk_session.id) == []
        assert await vote_repo.find_participant_ids(talk_session.id) == []


    @pytest.mark.asyncio
    async def test_failed_insert_removes_uploaded_picture(self, unit_env):
        use_case = await unit_env.get(SubmitOpinionUseCase)
        storage = await unit_env.get(InMemoryImageStorage)
        opinion_repo = await unit_env.get(OpinionRepository)
        _, talk_session = await seed_talk_session(unit_env)
        author = await seed_user(unit_env)

        with patch.object(
            opinion_repo, "create", side_effect=RuntimeError("connection lost")
        ):
            with pytest.raises(RuntimeError):
                await use_case.execute(
                    SubmitOpinionRequest(
                        talk_session_id=str(talk_session.id),
                        author_id=str(author.id),
                        content="See the attached map",
                        picture=b"\x89PNG fake image bytes",
                    )
                )

        assert storage.objects == {}
