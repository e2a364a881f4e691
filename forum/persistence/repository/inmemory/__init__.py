"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
