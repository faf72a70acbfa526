"""Contract with the external analysis service."""

from abc import ABC, abstractmethod

from agora.domain.value import TalkSessionId


class AnalysisService(ABC):
    """Clustering and report generation performed outside this service."""

    @abstractmethod
    async def start_analysis(self, talk_session_id: TalkSessionId) -> None:
        """Ask the analysis service to recompute opinion groups.

        Raises:
            AnalysisServiceError: If the request fails
        """
        pass

    @abstractmethod
    async def generate_report(self, talk_session_id: TalkSessionId) -> None:
        """Ask the analysis service to regenerate the session report.

        Raises:
            AnalysisServiceError: If the request fails
        """
        pass
