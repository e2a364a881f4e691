"""PostgreSQL implementation of Like repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

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
from forum.persistence.mappers import like_to_dict, row_to_like
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = random_id
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new like ids
        """
        self.session = session
        self.id_generator = id_generator

    def _match(self, comment_id: CommentId, user_id: UserId):
        return and_(
            likes_table.c.comment_id == comment_id,
            likes_table.c.user_id == user_id,
        )

    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Like]:
        """Find a user's like on a comment, locking it if present."""
        stmt = (
            select(likes_table)
            .where(self._match(comment_id, user_id))
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def add(self, comment_id: CommentId, user_id: UserId) -> Like:
        """Record a like.

        A concurrent like from the same user hits the unique constraint and
        is ignored, so the existing row is returned instead.
        """
        like = Like(
            id=LikeId(make_id(LIKE_ID_PREFIX, self.id_generator)),
            comment_id=comment_id,
            user_id=user_id,
        )
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(index_elements=["comment_id", "user_id"])
            .returning(likes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        if row is None:
            existing = await self.find(comment_id, user_id)
            return existing or like
        return row_to_like(row._asdict())

    async def remove(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a like."""
        stmt = delete(likes_table).where(self._match(comment_id, user_id))
        await self.session.execute(stmt)
        await self.session.flush()

    async def count(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
