"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.reply import AddedReply, NewReply, Reply, ReplyView
from forum.domain.value import CommentId, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Mirrors CommentRepository one level deeper, scoped by comment.
    """

    @abstractmethod
    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply on a comment.

        Args:
            new_reply: Validated reply with its comment and owner

        Returns:
            The created reply projection (id, content, owner)
        """
        pass

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Reply:
        """Find a reply by ID, including soft-deleted ones.

        Raises:
            NotFoundError: If the reply does not exist
        """
        pass

    @abstractmethod
    async def find_by_comment_id(self, comment_id: CommentId) -> List[ReplyView]:
        """Find all replies of a comment, oldest first.

        Args:
            comment_id: The comment ID

        Returns:
            Replies ordered by creation time ascending (empty if none)
        """
        pass

    @abstractmethod
    async def verify_owner(self, reply_id: ReplyId, owner: Optional[str]) -> None:
        """Check that a user owns a reply.

        Raises:
            NotFoundError: If the reply does not exist
            NotAuthorizedError: If the user does not own the reply
        """
        pass

    @abstractmethod
    async def soft_delete(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted.

        Raises:
            NotFoundError: If the reply does not exist
        """
        pass
