"""In-memory like repository for testing."""

from typing import Optional

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import (
    LIKE_ID_PREFIX,
    CommentId,
    IdGenerator,
    LikeId,
    UserId,
    make_id,
    random_id,
)


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, id_generator: IdGenerator = random_id) -> None:
        self._likes: dict[tuple[CommentId, UserId], Like] = {}
        self._id_generator = id_generator

    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Like]:
        """Find a user's like on a comment."""
        return self._likes.get((comment_id, user_id))

    async def add(self, comment_id: CommentId, user_id: UserId) -> Like:
        """Record a like, returning the existing one on duplicates."""
        key = (comment_id, user_id)
        if key not in self._likes:
            self._likes[key] = Like(
                id=LikeId(make_id(LIKE_ID_PREFIX, self._id_generator)),
                comment_id=comment_id,
                user_id=user_id,
            )
        return self._likes[key]

    async def remove(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a like."""
        self._likes.pop((comment_id, user_id), None)

    async def count(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        return sum(1 for c, _ in self._likes if c == comment_id)
