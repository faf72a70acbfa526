"""Mock analysis provider for testing."""

from dishka import Scope, alias, provide

from agora.adapter.analysis import MockAnalysisService
from agora.domain.service import AnalysisService
from agora.util.di.infrastructure.analysis import AnalysisProvider


class MockAnalysisProvider(AnalysisProvider):
    """Records analysis requests instead of calling the service."""

    __is_mock__ = True

    scope = Scope.APP

    service = provide(MockAnalysisService)
    analysis_service = alias(source=MockAnalysisService, provides=AnalysisService)
