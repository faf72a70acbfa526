"""HTTP client for the external clustering and report service."""

from typing import Any

import httpx
import logfire

from agora.adapter.error import AnalysisServiceError
from agora.config import AnalysisSettings
from agora.domain.service import AnalysisService
from agora.domain.value import TalkSessionId


class HttpAnalysisService(AnalysisService):
    """Talks to the analysis service over JSON with HTTP basic auth."""

    def __init__(self, settings: AnalysisSettings) -> None:
        """Initialize analysis client.

        Args:
            settings: Base URL, credentials and timeout
        """
        self.base_url = settings.base_url.rstrip("/")
        self.auth = httpx.BasicAuth(settings.user, settings.password)
        self.timeout = settings.timeout_seconds

    async def start_analysis(self, talk_session_id: TalkSessionId) -> None:
        """Ask the service to recompute opinion groups.

        Raises:
            AnalysisServiceError: On transport errors or a non-200 response
        """
        # The service expects a user id but ignores it for group prediction
        await self._post(
            "/predicts/groups",
            {"talkSessionId": str(talk_session_id), "userId": "0"},
        )

    async def generate_report(self, talk_session_id: TalkSessionId) -> None:
        """Ask the service to regenerate the session report.

        Raises:
            AnalysisServiceError: On transport errors or a non-200 response
        """
        await self._post("/reports/generates", {"talkSessionId": str(talk_session_id)})

    async def _post(self, path: str, payload: dict[str, Any]) -> None:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(auth=self.auth, timeout=self.timeout) as client:
                response = await client.post(url, json=payload)
        except httpx.HTTPError as e:
            logfire.error("Analysis service HTTP error", url=url, error=str(e))
            raise AnalysisServiceError(f"HTTP error calling {path}: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Analysis service request failed",
                url=url,
                status_code=response.status_code,
                error=response.text,
            )
            raise AnalysisServiceError(
                f"{path} failed with status {response.status_code}"
            )

        logfire.info("Analysis service request succeeded", url=url)


class MockAnalysisService(AnalysisService):
    """Mock analysis service for testing.

    Records calls instead of making requests. Set ``fail_with`` to make
    every call raise.
    """

    def __init__(self) -> None:
        self.started: list[TalkSessionId] = []
        self.generated: list[TalkSessionId] = []
        self.fail_with: Exception | None = None

    async def start_analysis(self, talk_session_id: TalkSessionId) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.started.append(talk_session_id)

    async def generate_report(self, talk_session_id: TalkSessionId) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.generated.append(talk_session_id)
