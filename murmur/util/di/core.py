"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from murmur.config import Settings
from murmur.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider - concrete, no mocks needed.

    Settings are read once from environment variables and .env file.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()
