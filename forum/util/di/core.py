"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import AuthSettings, Settings
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings.

        Raises:
            ConfigurationError: If production runs with the default secret
        """
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings.auth
