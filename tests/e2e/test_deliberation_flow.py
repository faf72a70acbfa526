"""End-to-end tests for a talk session from opening to follow-up.

Runs the FastAPI app against the mocked container, so no services are
needed. The clock is fixed, which lets the tests move past the end time.
"""

from datetime import timedelta
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from agora.adapter.analysis import MockAnalysisService
from agora.application.background import BackgroundTasks
from agora.domain.clock import FixedClock
from agora.domain.model import AnalysisReport
from agora.domain.value import AnalysisReportId, TalkSessionId
from agora.interface.api.app import create_app
from agora.persistence.repository.inmemory import (
    InMemoryAnalysisReportRepository,
    InMemoryUserRepository,
)
from agora.util.di.container import setup_di
from tests.conftest import make_user
from tests.di import TEST_NOW, build_test_container


@pytest_asyncio.fixture
async def api():
    """Yield an HTTP client bound to the app and the container behind it."""
    container = build_test_container()
    app_instance = create_app()
    setup_di(app_instance, container)

    transport = httpx.ASGITransport(app=app_instance)
    try:
        async with httpx.AsyncClient(
            transport=transport, base_url="http://test"
        ) as client:
            yield client, container
    finally:
        await container.close()


async def _user(container) -> str:
    users = await container.get(InMemoryUserRepository)
    user = await users.save(make_user())
    return str(user.id)


def _as(user_id: str) -> dict[str, str]:
    return {"X-User-Id": user_id}


async def _open_session(client, owner_id: str, **fields) -> dict:
    payload = {
        "theme": "How should the riverside park be used?",
        "scheduled_end_time": (TEST_NOW + timedelta(days=1)).isoformat(),
        **fields,
    }
    response = await client.post("/talksessions", json=payload, headers=_as(owner_id))
    assert response.status_code == 201, response.text
    return response.json()


class TestDeliberationFlow:
    @pytest.mark.asyncio
    async def test_session_lifecycle(self, api):
        client, container = api
        owner = await _user(container)
        participant = await _user(container)

        talk_session = await _open_session(client, owner)
        session_id = talk_session["talk_session_id"]

        # Opinion from the owner; the author's agree vote comes with it
        response = await client.post(
            "/opinions",
            json={
                "talk_session_id": session_id,
                "content": "Keep the lawn open for picnics",
            },
            headers=_as(owner),
        )
        assert response.status_code == 201, response.text
        opinion_id = response.json()["opinion_id"]

        response = await client.post(
            f"/opinions/{opinion_id}/votes",
            json={"vote_type": "agree"},
            headers=_as(owner),
        )
        assert response.status_code == 409
        assert response.json()["code"] == "opinion_already_voted"

        response = await client.post(
            f"/opinions/{opinion_id}/votes",
            json={"vote_type": "disagree"},
            headers=_as(participant),
        )
        assert response.status_code == 201
        assert response.json()["vote_type"] == "disagree"

        background_tasks = await container.get(BackgroundTasks)
        await background_tasks.drain()
        analysis = await container.get(MockAnalysisService)
        assert str(analysis.started[-1]) == session_id

        # Timeline is closed until the session ends
        response = await client.post(
            f"/talksessions/{session_id}/timelines",
            json={"content": "Share the results", "status": "未着手"},
            headers=_as(owner),
        )
        assert response.status_code == 400
        assert response.json()["code"] == "talk_session_not_finished"

        clock = await container.get(FixedClock)
        clock.advance(timedelta(days=2))

        response = await client.post(
            f"/opinions/{opinion_id}/votes",
            json={"vote_type": "pass"},
            headers=_as(await _user(container)),
        )
        assert response.status_code == 409
        assert response.json()["code"] == "talk_session_is_finished"

        response = await client.post(
            f"/talksessions/{session_id}/conclusion",
            json={"content": "Picnic lawn stays. Benches will be added."},
            headers=_as(owner),
        )
        assert response.status_code == 201

        response = await client.post(
            f"/talksessions/{session_id}/timelines",
            json={"content": "Order benches", "status": "進行中"},
            headers=_as(owner),
        )
        assert response.status_code == 201
        action_item_id = response.json()["action_item_id"]

        response = await client.put(
            f"/talksessions/{session_id}/timelines/{action_item_id}",
            json={"status": "完了"},
            headers=_as(owner),
        )
        assert response.status_code == 200
        assert response.json()["status"] == "完了"

    @pytest.mark.asyncio
    async def test_moderation(self, api):
        client, container = api
        owner = await _user(container)
        author = await _user(container)
        reporter = await _user(container)
        talk_session = await _open_session(client, owner)

        response = await client.post(
            "/opinions",
            json={
                "talk_session_id": talk_session["talk_session_id"],
                "content": "Buy my product at example.com",
            },
            headers=_as(author),
        )
        opinion_id = response.json()["opinion_id"]

        response = await client.post(
            f"/opinions/{opinion_id}/reports",
            json={"reason": 2},
            headers=_as(reporter),
        )
        assert response.status_code == 201

        # Only the session owner sees reports
        response = await client.get(f"/opinions/{opinion_id}/reports", headers=_as(reporter))
        assert response.status_code == 404

        response = await client.get(f"/opinions/{opinion_id}/reports", headers=_as(owner))
        assert response.status_code == 200
        assert response.json()["reporter_count"] == 1

        response = await client.post(
            f"/opinions/{opinion_id}/reports/solve",
            json={"status": "deleted"},
            headers=_as(owner),
        )
        assert response.status_code == 200
        assert response.json()["updated_count"] == 1

        # Anyone reading the opinion now sees why it was removed
        response = await client.get(f"/opinions/{opinion_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["opinion"]["is_deleted"] is True
        assert body["opinion"]["author_id"] is None
        assert "スパム・宣伝" in body["opinion"]["content"]
        assert "example.com" not in body["opinion"]["content"]

    @pytest.mark.asyncio
    async def test_restricted_session_needs_consent(self, api):
        client, container = api
        owner = await _user(container)
        talk_session = await _open_session(
            client, owner, restrictions=["demographics.gender"]
        )
        session_id = talk_session["talk_session_id"]
        user = await _user(container)

        response = await client.get(
            f"/talksessions/{session_id}/restrictions", headers=_as(user)
        )
        assert response.status_code == 200
        assert response.json()["satisfied"] is False
        assert [r["key"] for r in response.json()["unsatisfied"]] == [
            "demographics.gender"
        ]

        response = await client.post(f"/talksessions/{session_id}/consent", headers=_as(user))
        assert response.status_code == 201
        assert response.json()["restrictions"] == ["demographics.gender"]

        response = await client.post(f"/talksessions/{session_id}/consent", headers=_as(user))
        assert response.status_code == 409


class TestRequestErrors:
    @pytest.mark.asyncio
    async def test_missing_user_header(self, api):
        client, _ = api

        response = await client.post(
            "/talksessions",
            json={"theme": "x", "scheduled_end_time": TEST_NOW.isoformat()},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "unauthenticated"

    @pytest.mark.asyncio
    async def test_invalid_restrictions_listed(self, api):
        client, container = api
        owner = await _user(container)

        response = await client.post(
            "/talksessions",
            json={
                "theme": "Parking",
                "scheduled_end_time": (TEST_NOW + timedelta(days=1)).isoformat(),
                "restrictions": ["demographics.gender", "shoe_size"],
            },
            headers=_as(owner),
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "restriction_attribute_invalid"
        assert "shoe_size" in body["message"]

    @pytest.mark.asyncio
    async def test_unknown_session(self, api):
        client, _ = api

        response = await client.put(
            f"/talksessions/{uuid4()}",
            json={"theme": "New theme"},
            headers=_as(str(uuid4())),
        )

        assert response.status_code == 404
        assert response.json()["code"] == "talk_session_not_found"

    @pytest.mark.asyncio
    async def test_malformed_path_id_is_a_bad_request(self, api):
        client, container = api
        user = await _user(container)

        response = await client.post(
            "/opinions/not-a-uuid/votes",
            json={"vote_type": "agree"},
            headers=_as(user),
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "identifier_invalid"
        assert "opinion_id" in body["message"]

    @pytest.mark.asyncio
    async def test_malformed_session_id_is_a_bad_request(self, api):
        client, container = api
        user = await _user(container)

        response = await client.post("/talksessions/12345/consent", headers=_as(user))

        assert response.status_code == 400
        assert response.json()["code"] == "identifier_invalid"

    @pytest.mark.asyncio
    async def test_unregistered_user_cannot_consent(self, api):
        client, container = api
        owner = await _user(container)
        session_id = (await _open_session(client, owner))["talk_session_id"]

        response = await client.post(
            f"/talksessions/{session_id}/consent", headers=_as(str(uuid4()))
        )

        assert response.status_code == 404
        assert response.json()["code"] == "user_not_found"


class TestAnalysisFeedback:
    @pytest.mark.asyncio
    async def test_one_rating_per_user(self, api):
        client, container = api
        user = await _user(container)
        reports = await container.get(InMemoryAnalysisReportRepository)
        report = await reports.save(
            AnalysisReport(
                id=AnalysisReportId(uuid4()),
                talk_session_id=TalkSessionId(uuid4()),
                report="Shade and benches come up most often.",
                created_at=TEST_NOW,
                updated_at=TEST_NOW,
            )
        )
        url = f"/analysis/reports/{report.id}/feedback"

        response = await client.post(
            url, json={"feedback_type": "good"}, headers=_as(user)
        )
        assert response.status_code == 200
        assert response.json()["feedback_count"] == 1

        response = await client.post(
            url, json={"feedback_type": "bad"}, headers=_as(user)
        )
        assert response.status_code == 409
        assert response.json()["code"] == "analysis_report_already_feedbacked"

    @pytest.mark.asyncio
    async def test_unknown_report(self, api):
        client, container = api
        user = await _user(container)

        response = await client.post(
            f"/analysis/reports/{uuid4()}/feedback",
            json={"feedback_type": "good"},
            headers=_as(user),
        )

        assert response.status_code == 404
        assert response.json()["code"] == "analysis_report_not_found"


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, api):
        client, _ = api

        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["timestamp"].startswith("2025-06-01T12:00:00")
        assert body["pending_analysis_tasks"] == 0
