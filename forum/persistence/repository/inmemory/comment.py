"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import AddComment, AddedComment, Comment, CommentView
from forum.domain.model.common import utc_now
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    COMMENT_ID_PREFIX,
    CommentId,
    IdGenerator,
    ThreadId,
    UserId,
    make_id,
    random_id,
)

from .user import InMemoryUserRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(
        self,
        users: Optional[InMemoryUserRepository] = None,
        id_generator: IdGenerator = random_id,
    ) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._users = users or InMemoryUserRepository()
        self._id_generator = id_generator

    async def add_comment(self, new_comment: AddComment) -> AddedComment:
        """Persist a new comment on a thread."""
        comment = Comment(
            id=CommentId(make_id(COMMENT_ID_PREFIX, self._id_generator)),
            thread_id=ThreadId(new_comment.thread_id),
            owner=UserId(new_comment.owner),
            content=new_comment.content,
        )
        self._comments[comment.id] = comment
        return AddedComment(
            id=comment.id, content=comment.content, owner=comment.owner
        )

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id)
        return comment

    async def find_by_thread_id(self, thread_id: ThreadId) -> list[CommentView]:
        """Find all comments of a thread, oldest first."""
        comments = [c for c in self._comments.values() if c.thread_id == thread_id]

        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)

        return [
            CommentView(
                id=c.id,
                content=c.content,
                is_delete=c.is_delete,
                date=c.created_at,
                username=await self._users.username_of(c.owner),
            )
            for c in comments
        ]

    async def verify_owner(self, comment_id: CommentId, owner: Optional[str]) -> None:
        """Check that a user owns a comment."""
        comment = await self.find_by_id(comment_id)
        if comment.owner != owner:
            raise NotAuthorizedError("comment", comment_id, owner)

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted."""
        comment = await self.find_by_id(comment_id)
        self._comments[comment_id] = comment.model_copy(
            update={"is_delete": True, "updated_at": utc_now()}
        )
