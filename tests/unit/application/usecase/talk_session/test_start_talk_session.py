"""Unit tests for StartTalkSessionUseCase."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from agora.application.usecase.talk_session import (
    LocationPayload,
    StartTalkSessionRequest,
    StartTalkSessionUseCase,
)
from agora.config import TalkSessionSettings
from agora.domain.clock import FixedClock
from agora.domain.error import (
    InvalidRestrictionAttributeError,
    InvalidScheduledEndTimeError,
    OrganizationRequiredError,
    UserNotFoundError,
)
from agora.domain.model import TalkSessionStarted
from agora.domain.repository import TalkSessionRepository
from agora.domain.value import TalkSessionId
from agora.persistence.repository.inmemory import (
    InMemoryDomainEventRepository,
    InMemoryTransactionManager,
)
from tests.conftest import seed_user
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _request(owner_id, **overrides) -> StartTalkSessionRequest:
    fields = dict(
        owner_id=str(owner_id),
        theme="Weekend market in the station square",
        scheduled_end_time=TEST_NOW + timedelta(days=7),
    )
    fields.update(overrides)
    return StartTalkSessionRequest(**fields)


class TestStartTalkSession:
    @pytest.mark.asyncio
    async def test_start(self, unit_env):
        use_case = await unit_env.get(StartTalkSessionUseCase)
        session_repo = await unit_env.get(TalkSessionRepository)
        events = await unit_env.get(InMemoryDomainEventRepository)
        owner = await seed_user(unit_env)

        response = await use_case.execute(
            _request(
                owner.id,
                location=LocationPayload(latitude=35.0, longitude=135.7),
                restrictions=["demographics.prefecture"],
                show_top=False,
            )
        )

        stored = await session_repo.find_by_id(TalkSessionId(UUID(response.talk_session_id)))
        assert stored is not None
        assert stored.show_top is False
        assert response.restrictions == ["demographics.prefecture"]
        assert response.location == LocationPayload(latitude=35.0, longitude=135.7)
        [event] = events.events
        assert isinstance(event, TalkSessionStarted)
        assert event.talk_session_id == stored.id

    @pytest.mark.asyncio
    async def test_unknown_owner(self, unit_env):
        use_case = await unit_env.get(StartTalkSessionUseCase)

        with pytest.raises(UserNotFoundError):
            await use_case.execute(_request(uuid4()))

    @pytest.mark.asyncio
    async def test_end_time_in_past(self, unit_env):
        use_case = await unit_env.get(StartTalkSessionUseCase)
        owner = await seed_user(unit_env)

        with pytest.raises(InvalidScheduledEndTimeError):
            await use_case.execute(
                _request(owner.id, scheduled_end_time=TEST_NOW - timedelta(hours=1))
            )

    @pytest.mark.asyncio
    async def test_invalid_restrictions(self, unit_env):
        use_case = await unit_env.get(StartTalkSessionUseCase)
        transaction_manager = await unit_env.get(InMemoryTransactionManager)
        owner = await seed_user(unit_env)

        with pytest.raises(InvalidRestrictionAttributeError) as exc_info:
            await use_case.execute(_request(owner.id, restrictions=["a", "b"]))

        assert exc_info.value.keys == ["a", "b"]
        assert transaction_manager.commits == 0


class TestOrganizationPolicy:
    @pytest.mark.asyncio
    async def test_owner_without_organization_rejected(self, unit_env):
        base = await unit_env.get(StartTalkSessionUseCase)
        use_case = StartTalkSessionUseCase(
            talk_session_repository=base.talk_session_repository,
            user_repository=base.user_repository,
            event_repository=base.event_repository,
            transaction_manager=base.transaction_manager,
            clock=await unit_env.get(FixedClock),
            settings=TalkSessionSettings(require_organization=True),
        )
        owner = await seed_user(unit_env)

        with pytest.raises(OrganizationRequiredError):
            await use_case.execute(_request(owner.id))

    @pytest.mark.asyncio
    async def test_owner_with_organization_allowed(self, unit_env):
        base = await unit_env.get(StartTalkSessionUseCase)
        use_case = StartTalkSessionUseCase(
            talk_session_repository=base.talk_session_repository,
            user_repository=base.user_repository,
            event_repository=base.event_repository,
            transaction_manager=base.transaction_manager,
            clock=await unit_env.get(FixedClock),
            settings=TalkSessionSettings(require_organization=True),
        )
        owner = await seed_user(unit_env, organization_id=uuid4())

        response = await use_case.execute(_request(owner.id))

        assert response.owner_id == str(owner.id)
