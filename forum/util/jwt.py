"""JWT token utilities.

Access tokens are issued by the authentication service. The forum verifies
them with the shared secret and reads the user id from the ``id`` claim.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict

from forum.config import AuthSettings
from forum.util.error import JWTError


class TokenPayload(BaseModel):
    """JWT token payload."""

    model_config = ConfigDict(extra="ignore")

    id: str
    username: str | None = None
    exp: datetime | None = None


def create_token(
    user_id: str, settings: AuthSettings, username: str | None = None
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        settings: Authentication settings
        username: Optional username claim

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "id": user_id,
        "username": username,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    if not payload.get("id"):
        raise JWTError("Token has no user id")
    return TokenPayload(**payload)
