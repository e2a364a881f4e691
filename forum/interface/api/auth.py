"""Authentication helpers for API routes."""

from fastapi import HTTPException, status

from forum.domain.service import JWTService


def require_user_id(jwt_service: JWTService, authorization: str | None) -> str:
    """Return the authenticated user's id or raise 401.

    Args:
        jwt_service: JWT service for token verification
        authorization: ``Authorization`` header value

    Raises:
        HTTPException: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_header(authorization)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication",
        )
    return user_id
