"""Configuration providers."""

from dishka import Scope, provide

from askabout.config import AuthSettings, DatabaseSettings, Settings
from askabout.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes ``Settings`` and its sections to the rest of the graph.

    Settings are read once per container from the environment and ``.env``.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Signing settings for ``auth_token`` cookies."""
        return settings.auth

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Connection settings for the PostgreSQL engine."""
        return settings.database
