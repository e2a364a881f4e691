"""Reply entities.

Replies are second-level replies attached to a comment. They follow the
same soft-delete and masking rules as comments.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from forum.domain.model.common import DomainModel, Entity, RequiredStr, utc_now
from forum.domain.value import (
    DELETED_REPLY_PLACEHOLDER,
    CommentId,
    ReplyId,
    UserId,
)


class Reply(DomainModel):
    """Reply entity as stored."""

    id: ReplyId
    comment_id: CommentId
    owner: UserId
    content: str
    is_delete: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class AddReply(Entity):
    """Reply content; thread and comment ids are checked by the use case."""

    __entity_name__ = "ADD_REPLY"

    content: RequiredStr


class NewReply(Entity):
    """Reply ready to persist under a comment."""

    __entity_name__ = "NEW_REPLY"

    content: RequiredStr
    comment_id: RequiredStr
    owner: RequiredStr


class AddedReply(Entity):
    """Projection returned after a reply is created."""

    __entity_name__ = "ADDED_REPLY"

    id: RequiredStr
    content: RequiredStr
    owner: RequiredStr


class DeleteReply(Entity):
    """Payload for deleting a reply."""

    __entity_name__ = "DELETE_REPLY"

    reply_id: RequiredStr
    comment_id: Optional[RequiredStr] = None
    thread_id: Optional[RequiredStr] = None
    owner: Any = None


class ReplyView(DomainModel):
    """Reply row joined with the owner's username."""

    id: ReplyId
    content: str
    is_delete: bool
    date: datetime
    username: Optional[str] = None

    @property
    def visible_content(self) -> str:
        """Content as shown to readers."""
        return DELETED_REPLY_PLACEHOLDER if self.is_delete else self.content


class ReplyDetail(DomainModel):
    """Reply as it appears in a thread detail."""

    id: ReplyId
    content: str
    date: datetime
    username: Optional[str] = None
