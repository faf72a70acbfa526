"""Unit tests for TakeConsentUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.talk_session import (
    TakeConsentRequest,
    TakeConsentUseCase,
)
from agora.domain.error import (
    TalkSessionAlreadyConsentedError,
    InvalidIdentifierError,
    TalkSessionNotFoundError,
    UserNotFoundError,
)
from agora.domain.repository import TalkSessionConsentRepository, TalkSessionRepository
from tests.conftest import seed_talk_session, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTakeConsent:
    @pytest.mark.asyncio
    async def test_consent_snapshots_current_restrictions(self, unit_env):
        use_case = await unit_env.get(TakeConsentUseCase)
        session_repo = await unit_env.get(TalkSessionRepository)
        _, talk_session = await seed_talk_session(
            unit_env, restrictions=["demographics.gender", "demographics.birth"]
        )
        user = await seed_user(unit_env)

        response = await use_case.execute(
            TakeConsentRequest(talk_session_id=str(talk_session.id), user_id=str(user.id))
        )

        # Later edits to the session do not change what was consented to
        talk_session.update_restrictions(["auth.register"])
        await session_repo.update(talk_session)

        assert response.restrictions == ["demographics.gender", "demographics.birth"]

    @pytest.mark.asyncio
    async def test_consent_twice(self, unit_env):
        use_case = await unit_env.get(TakeConsentUseCase)
        _, talk_session = await seed_talk_session(
            unit_env, restrictions=["demographics.gender"]
        )
        user = await seed_user(unit_env)
        request = TakeConsentRequest(
            talk_session_id=str(talk_session.id), user_id=str(user.id)
        )
        await use_case.execute(request)

        with pytest.raises(TalkSessionAlreadyConsentedError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unrestricted_session_needs_no_consent(self, unit_env):
        use_case = await unit_env.get(TakeConsentUseCase)
        _, talk_session = await seed_talk_session(unit_env)
        user = await seed_user(unit_env)

        with pytest.raises(TalkSessionAlreadyConsentedError):
            await use_case.execute(
                TakeConsentRequest(
                    talk_session_id=str(talk_session.id), user_id=str(user.id)
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_session(self, unit_env):
        use_case = await unit_env.get(TakeConsentUseCase)

        with pytest.raises(TalkSessionNotFoundError):
            await use_case.execute(
                TakeConsentRequest(talk_session_id=str(uuid4()), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_unregistered_user_cannot_consent(self, unit_env):
        use_case = await unit_env.get(TakeConsentUseCase)
        consent_repo = await unit_env.get(TalkSessionConsentRepository)
        _, talk_session = await seed_talk_session(
            unit_env, restrictions=["demographics.gender"]
        )
        stranger_id = uuid4()

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                TakeConsentRequest(
                    talk_session_id=str(talk_session.id), user_id=str(stranger_id)
                )
            )

        assert await consent_repo.find(talk_session.id, stranger_id) is None

    @pytest.mark.asyncio
    async def test_malformed_session_id(self, unit_env):
        use_case = await unit_env.get(TakeConsentUseCase)

        with pytest.raises(InvalidIdentifierError) as exc_info:
            await use_case.execute(
                TakeConsentRequest(talk_session_id="not-a-uuid", user_id=str(uuid4()))
            )

        assert exc_info.value.field == "talk_session_id"
