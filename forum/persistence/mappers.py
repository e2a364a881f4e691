"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import (
    Comment,
    CommentView,
    Like,
    Reply,
    ReplyView,
    Thread,
    ThreadDetail,
    User,
)
from forum.domain.value import CommentId, LikeId, ReplyId, ThreadId, UserId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        fullname=row.get("fullname"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    return thread.model_dump()


def row_to_thread_detail(row: Dict[str, Any]) -> ThreadDetail:
    """Convert a thread row joined with users to a ThreadDetail.

    Args:
        row: Row with id, title, body, date and username

    Returns:
        ThreadDetail projection
    """
    return ThreadDetail(
        id=ThreadId(row["id"]),
        title=row["title"],
        body=row["body"],
        date=row["date"],
        username=row["username"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        thread_id=ThreadId(row["thread_id"]),
        owner=UserId(row["owner"]),
        content=row["content"],
        is_delete=bool(row["is_delete"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_comment_view(row: Dict[str, Any]) -> CommentView:
    """Convert a comment row joined with users to a CommentView."""
    return CommentView(
        id=CommentId(row["id"]),
        content=row["content"],
        is_delete=bool(row["is_delete"]),
        date=row["date"],
        username=row.get("username"),
    )


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model.

    Args:
        row: Database row as dict

    Returns:
        Reply domain model
    """
    return Reply(
        id=ReplyId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        owner=UserId(row["owner"]),
        content=row["content"],
        is_delete=bool(row["is_delete"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict."""
    return reply.model_dump()


def row_to_reply_view(row: Dict[str, Any]) -> ReplyView:
    """Convert a reply row joined with users to a ReplyView."""
    return ReplyView(
        id=ReplyId(row["id"]),
        content=row["content"],
        is_delete=bool(row["is_delete"]),
        date=row["date"],
        username=row.get("username"),
    )


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()
