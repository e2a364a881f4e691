"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    AddComment,
    AddedComment,
    Comment,
    CommentDetail,
    CommentView,
    DeleteComment,
)
from forum.domain.model.common import DomainModel, Entity
from forum.domain.model.like import Like, LikeComment, ToggledLike
from forum.domain.model.reply import (
    AddedReply,
    AddReply,
    DeleteReply,
    NewReply,
    Reply,
    ReplyDetail,
    ReplyView,
)
from forum.domain.model.thread import (
    AddedThread,
    AddThread,
    GetThread,
    Thread,
    ThreadDetail,
)
from forum.domain.model.user import User

__all__ = [
    "DomainModel",
    "Entity",
    "User",
    # Threads
    "Thread",
    "AddThread",
    "AddedThread",
    "ThreadDetail",
    "GetThread",
    # Comments
    "Comment",
    "AddComment",
    "AddedComment",
    "DeleteComment",
    "CommentView",
    "CommentDetail",
    # Replies
    "Reply",
    "AddReply",
    "NewReply",
    "AddedReply",
    "DeleteReply",
    "ReplyView",
    "ReplyDetail",
    # Likes
    "Like",
    "LikeComment",
    "ToggledLike",
]
