"""Analysis service infrastructure providers."""

from dishka import Scope, provide

from agora.adapter.analysis import HttpAnalysisService
from agora.config import AnalysisSettings, Settings
from agora.domain.service import AnalysisService
from agora.util.di.base import ProviderBase
from agora.util.error import ConfigurationError

_PLACEHOLDER_PASSWORD = "CHANGE_ME_IN_PRODUCTION"


class AnalysisProvider(ProviderBase):
    """Analysis component base."""

    __mock_component__ = "analysis"


class ProdAnalysisProvider(AnalysisProvider):
    """Production analysis provider calling the HTTP service."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_analysis_service(
        self, settings: Settings, analysis_settings: AnalysisSettings
    ) -> AnalysisService:
        """Provide analysis service client.

        Raises:
            ConfigurationError: If production runs with placeholder credentials
        """
        if (
            settings.environment == "production"
            and analysis_settings.password == _PLACEHOLDER_PASSWORD
        ):
            raise ConfigurationError(
                "ANALYSIS__PASSWORD", "placeholder value is not allowed in production"
            )

        return HttpAnalysisService(analysis_settings)
