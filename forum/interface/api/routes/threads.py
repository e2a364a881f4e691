"""Thread routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, status

from forum.application.usecase.thread import AddThreadUseCase, GetDetailThreadUseCase
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_thread(
    add_thread_use_case: FromDishka[AddThreadUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(default_factory=dict),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Create a thread.

    Requires authentication; the owner is the authenticated user.

    Args:
        add_thread_use_case: Add thread use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Request body with title and body
        authorization: Bearer token header

    Returns:
        The created thread's id, title and owner
    """
    user_id = require_user_id(jwt_service, authorization)
    added = await add_thread_use_case.execute({**payload, "owner": user_id})
    return {
        "status": "success",
        "data": {"addedThread": added.model_dump(by_alias=True)},
    }


@router.get("/{thread_id}")
async def get_thread(
    thread_id: str,
    get_detail_thread_use_case: FromDishka[GetDetailThreadUseCase],
) -> dict[str, Any]:
    """Get a thread with its comments, replies and like counts.

    Public endpoint.
    """
    thread = await get_detail_thread_use_case.execute({"threadId": thread_id})
    return {
        "status": "success",
        "data": {"thread": thread.model_dump(by_alias=True, mode="json")},
    }
