"""Core DI providers (non-mockable)."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from agora.application.background import BackgroundTasks
from agora.config import (
    AnalysisSettings,
    ImageSettings,
    Settings,
    TalkSessionSettings,
)
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_analysis_settings(self, settings: Settings) -> AnalysisSettings:
        return settings.analysis

    @provide(scope=Scope.APP)
    def provide_image_settings(self, settings: Settings) -> ImageSettings:
        return settings.images

    @provide(scope=Scope.APP)
    def provide_talk_session_settings(self, settings: Settings) -> TalkSessionSettings:
        return settings.talk_session

    @provide(scope=Scope.APP)
    async def provide_background_tasks(self) -> AsyncIterator[BackgroundTasks]:
        """Provide the app-wide background task set.

        Running tasks get a short grace period when the container closes.
        """
        tasks = BackgroundTasks()
        yield tasks
        if tasks.pending:
            logfire.info("Draining background tasks", pending=tasks.pending)
            await tasks.drain(timeout=10.0)
