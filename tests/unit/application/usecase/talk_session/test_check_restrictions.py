"""Unit tests for CheckRestrictionsUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.talk_session import (
    CheckRestrictionsRequest,
    CheckRestrictionsUseCase,
)
from agora.domain.error import TalkSessionNotFoundError
from agora.domain.model import Demographics
from tests.conftest import seed_talk_session, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCheckRestrictions:
    @pytest.mark.asyncio
    async def test_reports_missing_fields(self, unit_env):
        use_case = await unit_env.get(CheckRestrictionsUseCase)
        _, talk_session = await seed_talk_session(
            unit_env, restrictions=["demographics.gender", "demographics.birth"]
        )
        user = await seed_user(unit_env, demographics=Demographics(gender="female"))

        response = await use_case.execute(
            CheckRestrictionsRequest(
                talk_session_id=str(talk_session.id), user_id=str(user.id)
            )
        )

        assert not response.satisfied
        assert [(r.key, r.description) for r in response.unsatisfied] == [
            ("demographics.birth", "生年月日")
        ]

    @pytest.mark.asyncio
    async def test_unrestricted_session_is_satisfied(self, unit_env):
        use_case = await unit_env.get(CheckRestrictionsUseCase)
        _, talk_session = await seed_talk_session(unit_env)
        user = await seed_user(unit_env)

        response = await use_case.execute(
            CheckRestrictionsRequest(
                talk_session_id=str(talk_session.id), user_id=str(user.id)
            )
        )

        assert response.satisfied
        assert response.unsatisfied == []

    @pytest.mark.asyncio
    async def test_unknown_session(self, unit_env):
        use_case = await unit_env.get(CheckRestrictionsUseCase)
        user = await seed_user(unit_env)

        with pytest.raises(TalkSessionNotFoundError):
            await use_case.execute(
                CheckRestrictionsRequest(
                    talk_session_id=str(uuid4()), user_id=str(user.id)
                )
            )
