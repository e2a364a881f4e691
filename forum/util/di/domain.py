"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)
