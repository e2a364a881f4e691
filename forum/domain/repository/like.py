"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.like import Like
from forum.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for Like join rows.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Like]:
        """Find a user's like on a comment.

        Args:
            comment_id: The comment ID
            user_id: The user's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, comment_id: CommentId, user_id: UserId) -> Like:
        """Record a like.

        Args:
            comment_id: The comment ID
            user_id: The user's ID

        Returns:
            The created like
        """
        pass

    @abstractmethod
    async def remove(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a like. Removing a missing like is a no-op.

        Args:
            comment_id: The comment ID
            user_id: The user's ID
        """
        pass

    @abstractmethod
    async def count(self, comment_id: CommentId) -> int:
        """Count likes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Number of likes
        """
        pass
