"""Reply routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, status

from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/threads/{thread_id}/comments/{comment_id}/replies",
    tags=["replies"],
    route_class=DishkaRoute,
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_reply(
    thread_id: str,
    comment_id: str,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(default_factory=dict),
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Reply to a comment.

    Args:
        thread_id: Thread ID
        comment_id: Comment ID
        add_reply_use_case: Add reply use case from DI
        jwt_service: JWT service for token verification (injected)
        payload: Request body with content
        authorization: Bearer token header

    Returns:
        The created reply's id, content and owner
    """
    user_id = require_user_id(jwt_service, authorization)
    added = await add_reply_use_case.execute(
        {
            **payload,
            "threadId": thread_id,
            "commentId": comment_id,
            "owner": user_id,
        }
    )
    return {
        "status": "success",
        "data": {"addedReply": added.model_dump(by_alias=True)},
    }


@router.delete("/{reply_id}")
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Soft-delete a reply. Only the reply owner can delete."""
    user_id = require_user_id(jwt_service, authorization)
    await delete_reply_use_case.execute(
        {
            "threadId": thread_id,
            "commentId": comment_id,
            "replyId": reply_id,
            "owner": user_id,
        }
    )
    return {"status": "success"}
