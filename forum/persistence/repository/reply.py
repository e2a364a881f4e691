"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import AddedReply, NewReply, Reply, ReplyView
from forum.domain.model.common import utc_now
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    REPLY_ID_PREFIX,
    CommentId,
    IdGenerator,
    ReplyId,
    UserId,
    make_id,
    random_id,
)
from forum.persistence.mappers import reply_to_dict, row_to_reply, row_to_reply_view
from forum.persistence.tables import replies_table, users_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = random_id
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new reply ids
        """
        self.session = session
        self.id_generator = id_generator

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply on a comment."""
        reply = Reply(
            id=ReplyId(make_id(REPLY_ID_PREFIX, self.id_generator)),
            comment_id=CommentId(new_reply.comment_id),
            owner=UserId(new_reply.owner),
            content=new_reply.content,
        )
        stmt = (
            insert(replies_table)
            .values(**reply_to_dict(reply))
            .returning(
                replies_table.c.id, replies_table.c.content, replies_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return AddedReply(**row._asdict())

    async def find_by_id(self, reply_id: ReplyId) -> Reply:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("reply", reply_id)
        return row_to_reply(row._asdict())

    async def find_by_comment_id(self, comment_id: CommentId) -> List[ReplyView]:
        """Find all replies of a comment, oldest first."""
        stmt = (
            select(
                replies_table.c.id,
                replies_table.c.content,
                replies_table.c.is_delete,
                replies_table.c.created_at.label("date"),
                users_table.c.username,
            )
            .select_from(
                replies_table.outerjoin(
                    users_table, replies_table.c.owner == users_table.c.id
                )
            )
            .where(replies_table.c.comment_id == comment_id)
            .order_by(replies_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply_view(row._asdict()) for row in result.fetchall()]

    async def verify_owner(self, reply_id: ReplyId, owner: Optional[str]) -> None:
        """Check that a user owns a reply, locking the row."""
        stmt = (
            select(replies_table.c.owner)
            .where(replies_table.c.id == reply_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("reply", reply_id)
        if row.owner != owner:
            raise NotAuthorizedError("reply", reply_id, owner)

    async def soft_delete(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(is_delete=True, updated_at=utc_now())
            .returning(replies_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("reply", reply_id)
        await self.session.flush()
