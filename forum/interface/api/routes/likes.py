"""Like routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from forum.application.usecase.like import LikeCommentUseCase
from forum.domain.service import JWTService
from forum.interface.api.auth import require_user_id

router = APIRouter(prefix="/threads", tags=["likes"], route_class=DishkaRoute)


@router.put("/{thread_id}/comments/{comment_id}/likes")
async def like_comment(
    thread_id: str,
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Toggle the authenticated user's like on a comment.

    Liking a comment twice removes the like.
    """
    user_id = require_user_id(jwt_service, authorization)
    await like_comment_use_case.execute(
        {"threadId": thread_id, "commentId": comment_id, "userId": user_id}
    )
    return {"status": "success"}
