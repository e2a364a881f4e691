"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, status

from forum.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


@router.post("/{thread_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    thread_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(default_factory=dict),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Comment on a thread.

    Args:
        thread_id: Thread ID
        add_comment_use_case: Add comment use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Request body with content
        authorization: Bearer token header

    Returns:
        The created comment's id, content and owner
    """
    user_id = require_user_id(jwt_service, authorization)
    added = await add_comment_use_case.execute(
        {**payload, "threadId": thread_id, "owner": user_id}
    )
    return {
        "status": "success",
        "data": {"addedComment": added.model_dump(by_alias=True)},
    }


@router.delete("/{thread_id}/comments/{comment_id}")
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Soft-delete a comment. Only the comment owner can delete."""
    user_id = require_user_id(jwt_service, authorization)
    await delete_comment_use_case.execute(
        {"threadId": thread_id, "commentId": comment_id, "owner": user_id}
    )
    return {"status": "success"}
