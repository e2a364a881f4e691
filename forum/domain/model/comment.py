"""Comment entities.

Comments are first-level replies attached to a thread. They are
soft-deleted: deletion sets ``is_delete`` and readers see a placeholder
instead of the original content.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from forum.domain.model.common import DomainModel, Entity, RequiredStr, utc_now
from forum.domain.model.reply import ReplyDetail
from forum.domain.value import (
    DELETED_COMMENT_PLACEHOLDER,
    CommentId,
    ThreadId,
    UserId,
)


class Comment(DomainModel):
    """Comment entity as stored."""

    id: CommentId
    thread_id: ThreadId
    owner: UserId
    content: str
    is_delete: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class AddComment(Entity):
    """Payload for commenting on a thread."""

    __entity_name__ = "ADD_COMMENT"

    thread_id: RequiredStr
    content: RequiredStr
    owner: RequiredStr


class AddedComment(Entity):
    """Projection returned after a comment is created."""

    __entity_name__ = "ADDED_COMMENT"

    id: RequiredStr
    content: RequiredStr
    owner: RequiredStr


class DeleteComment(Entity):
    """Payload for deleting a comment.

    ``thread_id`` is type-checked when present but not required; ``owner``
    is carried through unvalidated and compared by the ownership check.
    """

    __entity_name__ = "DELETE_COMMENT"

    comment_id: RequiredStr
    thread_id: Optional[RequiredStr] = None
    owner: Any = None


class CommentView(DomainModel):
    """Comment row joined with the owner's username, as read for display."""

    id: CommentId
    content: str
    is_delete: bool
    date: datetime
    username: Optional[str] = None

    @property
    def visible_content(self) -> str:
        """Content as shown to readers."""
        return DELETED_COMMENT_PLACEHOLDER if self.is_delete else self.content


class CommentDetail(DomainModel):
    """Comment as it appears in a thread detail."""

    id: CommentId
    username: Optional[str] = None
    date: datetime
    content: str
    like_count: int = 0
    replies: list[ReplyDetail] = Field(default_factory=list)
