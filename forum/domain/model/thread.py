"""Thread entities.

Threads are the top-level discussion topics. A thread is immutable after
creation; its comments hang off it through ``Comment.thread_id``.
"""

from datetime import datetime
from pydantic import Field

from forum.domain.model.comment import CommentDetail
from forum.domain.model.common import DomainModel, Entity, RequiredStr, utc_now
from forum.domain.value import ThreadId, UserId


class Thread(DomainModel):
    """Thread entity as stored."""

    id: ThreadId
    title: str
    body: str
    owner: UserId
    created_at: datetime = Field(default_factory=utc_now)


class AddThread(Entity):
    """Payload for creating a thread."""

    __entity_name__ = "ADD_THREAD"

    title: RequiredStr
    body: RequiredStr
    owner: RequiredStr


class AddedThread(Entity):
    """Projection returned after a thread is created."""

    __entity_name__ = "ADDED_THREAD"

    id: RequiredStr
    title: RequiredStr
    owner: RequiredStr


class ThreadDetail(DomainModel):
    """Thread projection joined with the owner's username."""

    id: ThreadId
    title: str
    body: str
    date: datetime
    username: str


class GetThread(Entity):
    """Thread detail with its nested comments and replies."""

    __entity_name__ = "GET_THREAD"

    id: RequiredStr
    title: RequiredStr
    body: RequiredStr
    date: datetime
    username: RequiredStr
    comments: list[CommentDetail]
