"""Unit tests for VoteUseCase."""

from datetime import timedelta
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from agora.adapter.analysis import MockAnalysisService
from agora.application.background import BackgroundTasks
from agora.application.usecase.vote import VoteRequest, VoteUseCase
from agora.domain.clock import FixedClock
from agora.domain.error import (
    InvalidVoteTypeError,
    OpinionAlreadyVotedError,
    OpinionNotFoundError,
    RestrictionNotSatisfiedError,
    TalkSessionIsFinishedError,
)
from agora.domain.model import Vote
from agora.domain.repository import OpinionRepository, VoteRepository
from agora.domain.service import OpinionService
from agora.domain.value import VoteType
from agora.persistence.repository.inmemory import InMemoryTransactionManager
from tests.conftest import make_opinion, seed_talk_session, seed_user
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_opinion(env, restrictions=None):
    owner, talk_session = await seed_talk_session(env, restrictions=restrictions)
    opinion_repo = await env.get(OpinionRepository)
    opinion = await opinion_repo.create(make_opinion(talk_session.id, owner.id))
    return talk_session, opinion


class TestVoteUseCase:
    """Tests for VoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_success(self, unit_env):
        """A participant can vote once on an open session's opinion."""
        # Arrange
        use_case = await unit_env.get(VoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        talk_session, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)

        # Act
        response = await use_case.execute(
            VoteRequest(
                opinion_id=str(opinion.id), user_id=str(voter.id), vote_type="agree"
            )
        )

        # Assert
        assert response.vote_type == "agree"
        assert response.talk_session_id == str(talk_session.id)
        stored = await vote_repo.find_by_opinion_and_user(opinion.id, voter.id)
        assert stored is not None
        assert stored.vote_type is VoteType.AGREE

    @pytest.mark.asyncio
    async def test_second_vote_conflicts(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        _, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)
        request = VoteRequest(
            opinion_id=str(opinion.id), user_id=str(voter.id), vote_type="agree"
        )
        await use_case.execute(request)

        with pytest.raises(OpinionAlreadyVotedError):
            await use_case.execute(request.model_copy(update={"vote_type": "disagree"}))

        # The first vote stands
        votes = await vote_repo.find_by_opinion_id(opinion.id)
        assert [v.vote_type for v in votes] == [VoteType.AGREE]

    @pytest.mark.asyncio
    async def test_finished_session_rejects_votes(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        clock = await unit_env.get(FixedClock)
        vote_repo = await unit_env.get(VoteRepository)
        _, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)

        clock.advance(timedelta(days=2))

        with pytest.raises(TalkSessionIsFinishedError):
            await use_case.execute(
                VoteRequest(
                    opinion_id=str(opinion.id), user_id=str(voter.id), vote_type="pass"
                )
            )
        assert await vote_repo.find_by_opinion_id(opinion.id) == []

    @pytest.mark.asyncio
    async def test_unvoted_is_not_a_vote(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        _, opinion = await _seed_opinion(unit_env)

        with pytest.raises(InvalidVoteTypeError):
            await use_case.execute(
                VoteRequest(
                    opinion_id=str(opinion.id),
                    user_id=str(uuid4()),
                    vote_type="unvoted",
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_opinion(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)

        with pytest.raises(OpinionNotFoundError):
            await use_case.execute(
                VoteRequest(opinion_id=str(uuid4()), user_id=str(uuid4()), vote_type="agree")
            )

    @pytest.mark.asyncio
    async def test_restricted_session_requires_attributes(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        _, opinion = await _seed_opinion(unit_env, restrictions=["demographics.gender"])
        voter = await seed_user(unit_env)

        with pytest.raises(RestrictionNotSatisfiedError):
            await use_case.execute(
                VoteRequest(
                    opinion_id=str(opinion.id), user_id=str(voter.id), vote_type="agree"
                )
            )

    @pytest.mark.asyncio
    async def test_vote_commits_once_and_dispatches_analysis(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        transaction_manager = await unit_env.get(InMemoryTransactionManager)
        analysis = await unit_env.get(MockAnalysisService)
        background_tasks = await unit_env.get(BackgroundTasks)
        talk_session, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)

        await use_case.execute(
            VoteRequest(
                opinion_id=str(opinion.id), user_id=str(voter.id), vote_type="disagree"
            )
        )
        await background_tasks.drain()

        assert transaction_manager.commits == 1
        assert analysis.started == [talk_session.id]
        # No report exists yet, so one is generated
        assert analysis.generated == [talk_session.id]

    @pytest.mark.asyncio
    async def test_analysis_failure_does_not_fail_vote(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        analysis = await unit_env.get(MockAnalysisService)
        background_tasks = await unit_env.get(BackgroundTasks)
        vote_repo = await unit_env.get(VoteRepository)
        _, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)
        analysis.fail_with = RuntimeError("analysis service is down")

        response = await use_case.execute(
            VoteRequest(
                opinion_id=str(opinion.id), user_id=str(voter.id), vote_type="agree"
            )
        )
        await background_tasks.drain()

        assert response.vote_type == "agree"
        assert await vote_repo.find_by_opinion_and_user(opinion.id, voter.id)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_vote_rolls_back(self, unit_env):
        """A vote stored after the pre-check still conflicts at insert."""
        use_case = await unit_env.get(VoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        transaction_manager = await unit_env.get(InMemoryTransactionManager)
        analysis = await unit_env.get(MockAnalysisService)
        background_tasks = await unit_env.get(BackgroundTasks)
        talk_session, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)
        # The other request won the race
        await vote_repo.create(
            Vote.cast(opinion.id, talk_session.id, voter.id, VoteType.AGREE, TEST_NOW)
        )

        with patch.object(
            OpinionService, "is_voted", AsyncMock(return_value=False)
        ):
            with pytest.raises(OpinionAlreadyVotedError):
                await use_case.execute(
                    VoteRequest(
                        opinion_id=str(opinion.id),
                        user_id=str(voter.id),
                        vote_type="disagree",
                    )
                )
        await background_tasks.drain()

        assert transaction_manager.rollbacks == 1
        assert transaction_manager.commits == 0
        assert analysis.started == []
        assert analysis.generated == []
        stored = await vote_repo.find_by_opinion_and_user(opinion.id, voter.id)
        assert stored.vote_type is VoteType.AGREE


class TestVoteRepository:
    """Tests for the administrative vote correction path."""

    @pytest.mark.asyncio
    async def test_update_vote_type(self, unit_env):
        vote_repo = await unit_env.get(VoteRepository)
        talk_session, opinion = await _seed_opinion(unit_env)
        voter = await seed_user(unit_env)
        vote = await vote_repo.create(
            Vote.cast(opinion.id, talk_session.id, voter.id, VoteType.AGREE, TEST_NOW)
        )

        await vote_repo.update_vote_type(vote.id, VoteType.PASS)

        stored = await vote_repo.find_by_opinion_and_user(opinion.id, voter.id)
        assert stored.id == vote.id
        assert stored.vote_type is VoteType.PASS
