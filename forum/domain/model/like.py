"""Like entities.

A like is a join row between a user and a comment. Liking is toggled by
inserting or removing the row; the count is derived by counting rows.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel, Entity, RequiredStr, utc_now
from forum.domain.value import CommentId, LikeId, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per comment (unique constraint in the database)
    - No counter column; counts come from counting rows
    """

    id: LikeId
    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=utc_now)


class LikeComment(Entity):
    """Payload for toggling a like on a comment."""

    __entity_name__ = "LIKE_COMMENT"

    comment_id: RequiredStr
    thread_id: RequiredStr
    user_id: RequiredStr


class ToggledLike(DomainModel):
    """Outcome of a like toggle."""

    comment_id: CommentId
    liked: bool
