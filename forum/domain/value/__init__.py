"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    COMMENT_ID_PREFIX,
    LIKE_ID_PREFIX,
    REPLY_ID_PREFIX,
    THREAD_ID_PREFIX,
    CommentId,
    IdGenerator,
    LikeId,
    ReplyId,
    ThreadId,
    UserId,
    make_id,
    random_id,
)
from forum.domain.value.types import (
    DELETED_COMMENT_PLACEHOLDER,
    DELETED_REPLY_PLACEHOLDER,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "ReplyId",
    "LikeId",
    "IdGenerator",
    "make_id",
    "random_id",
    "THREAD_ID_PREFIX",
    "COMMENT_ID_PREFIX",
    "REPLY_ID_PREFIX",
    "LIKE_ID_PREFIX",
    # Placeholders
    "DELETED_COMMENT_PLACEHOLDER",
    "DELETED_REPLY_PLACEHOLDER",
]
