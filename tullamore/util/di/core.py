"""Configuration providers."""

from dishka import Scope, provide

from tullamore.config import PaginationSettings, Settings
from tullamore.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings are read once per container from the environment."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Paging limits, injected into list routes."""
        return settings.pagination
