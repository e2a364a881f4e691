"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

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
from forum.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_comment_view,
)
from forum.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = random_id
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new comment ids
        """
        self.session = session
        self.id_generator = id_generator

    async def add_comment(self, new_comment: AddComment) -> AddedComment:
        """Persist a new comment on a thread."""
        comment = Comment(
            id=CommentId(make_id(COMMENT_ID_PREFIX, self.id_generator)),
            thread_id=ThreadId(new_comment.thread_id),
            owner=UserId(new_comment.owner),
            content=new_comment.content,
        )
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(
                comments_table.c.id, comments_table.c.content, comments_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return AddedComment(**row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("comment", comment_id)
        return row_to_comment(row._asdict())

    async def find_by_thread_id(self, thread_id: ThreadId) -> List[CommentView]:
        """Find all comments of a thread, oldest first."""
        stmt = (
            select(
                comments_table.c.id,
                comments_table.c.content,
                comments_table.c.is_delete,
                comments_table.c.created_at.label("date"),
                users_table.c.username,
            )
            .select_from(
                comments_table.outerjoin(
                    users_table, comments_table.c.owner == users_table.c.id
                )
            )
            .where(comments_table.c.thread_id == thread_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row._asdict()) for row in result.fetchall()]

    async def verify_owner(self, comment_id: CommentId, owner: Optional[str]) -> None:
        """Check that a user owns a comment.

        Locks the comment row until the surrounding transaction ends.
        """
        stmt = (
            select(comments_table.c.owner)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("comment", comment_id)
        if row.owner != owner:
            raise NotAuthorizedError("comment", comment_id, owner)

    async def soft_delete(self, comment_id: CommentId) -> None:
        """Mark a comment as deleted."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(is_delete=True, updated_at=utc_now())
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("comment", comment_id)
        await self.session.flush()
