"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import AddComment, AddedComment, Comment, CommentView
from forum.domain.value import CommentId, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_comment(self, new_comment: AddComment) -> AddedComment:
        """Persist a new comment on a thread.

        Args:
            new_comment: Validated comment payload

        Returns:
            The created comment projection (id, content, owner)
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def find_by_thread_id(self, thread_id: ThreadId) -> List[CommentView]:
        """Find all comments of a thread, oldest first.

        Soft-deleted comments are included; masking happens at read time.

        Args:
            thread_id: The thread ID

        Returns:
            Comments ordered by creation time ascending (empty if none)
        """
        pass

    @abstractmethod
    async def verify_owner(self, comment_id: CommentId, owner: Optional[str]) -> None:
        """Check that a user owns a comment.

        Args:
            comment_id: The comment ID
            owner: The acting user's ID

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user does not own the comment
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted.

        Deleting an already deleted comment succeeds and leaves it deleted.

        Args:
            comment_id: The comment ID

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass
