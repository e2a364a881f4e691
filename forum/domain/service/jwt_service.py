"""Access token domain service."""

import logfire

from forum.config import AuthSettings
from forum.util.error import JWTError
from forum.util.jwt import TokenPayload, verify_token

from .base import Service

BEARER_PREFIX = "Bearer "


class JWTService(Service):
    """Domain service for access token verification."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.debug("JWT token verified", user_id=payload.id)
            return payload

    def get_user_id_from_header(self, authorization: str | None) -> str | None:
        """Extract the user ID from an ``Authorization: Bearer`` header.

        Args:
            authorization: Raw header value (optional)

        Returns:
            User ID if the token is valid, None if it is missing or invalid
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            return None

        token = authorization[len(BEARER_PREFIX) :].strip()
        try:
            return self.verify_token(token).id
        except JWTError:
            return None
