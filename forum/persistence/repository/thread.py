"""PostgreSQL implementation of Thread repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError, ThreadTitleTakenError
from forum.domain.model import AddedThread, AddThread, Thread, ThreadDetail
from forum.domain.repository import ThreadRepository
from forum.domain.value import (
    THREAD_ID_PREFIX,
    IdGenerator,
    ThreadId,
    UserId,
    make_id,
    random_id,
)
from forum.persistence.mappers import row_to_thread_detail, thread_to_dict
from forum.persistence.tables import threads_table, users_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = random_id
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new thread ids
        """
        self.session = session
        self.id_generator = id_generator

    async def add_thread(self, new_thread: AddThread) -> AddedThread:
        """Persist a new thread."""
        thread = Thread(
            id=ThreadId(make_id(THREAD_ID_PREFIX, self.id_generator)),
            title=new_thread.title,
            body=new_thread.body,
            owner=UserId(new_thread.owner),
        )
        stmt = (
            insert(threads_table)
            .values(**thread_to_dict(thread))
            .returning(threads_table.c.id, threads_table.c.title, threads_table.c.owner)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return AddedThread(**row._asdict())

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        stmt = select(threads_table.c.id).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise NotFoundError("thread", thread_id)

    async def get_thread_detail(self, thread_id: ThreadId) -> ThreadDetail:
        """Get a thread joined with its owner's username.

        Raises:
            NotFoundError: If the thread or its owner's user row is missing
        """
        stmt = (
            select(
                threads_table.c.id,
                threads_table.c.title,
                threads_table.c.body,
                threads_table.c.owner,
                threads_table.c.created_at.label("date"),
                users_table.c.username,
            )
            .select_from(
                threads_table.outerjoin(
                    users_table, threads_table.c.owner == users_table.c.id
                )
            )
            .where(threads_table.c.id == thread_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("thread", thread_id)
        if row.username is None:
            raise NotFoundError("user", row.owner)
        return row_to_thread_detail(row._asdict())

    async def verify_title_available(self, title: str) -> None:
        """Raise ThreadTitleTakenError if a thread already uses the title."""
        stmt = select(threads_table.c.id).where(threads_table.c.title == title).limit(1)
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is not None:
            raise ThreadTitleTakenError(title)
