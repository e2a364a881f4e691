"""In-memory thread repository for testing."""

from typing import Optional

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

from .user import InMemoryUserRepository


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(
        self,
        users: Optional[InMemoryUserRepository] = None,
        id_generator: IdGenerator = random_id,
    ) -> None:
        self._threads: dict[ThreadId, Thread] = {}
        self._users = users or InMemoryUserRepository()
        self._id_generator = id_generator

    async def add_thread(self, new_thread: AddThread) -> AddedThread:
        """Persist a new thread."""
        thread = Thread(
            id=ThreadId(make_id(THREAD_ID_PREFIX, self._id_generator)),
            title=new_thread.title,
            body=new_thread.body,
            owner=UserId(new_thread.owner),
        )
        self._threads[thread.id] = thread
        return AddedThread(id=thread.id, title=thread.title, owner=thread.owner)

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        if thread_id not in self._threads:
            raise NotFoundError("thread", thread_id)

    async def get_thread_detail(self, thread_id: ThreadId) -> ThreadDetail:
        """Get a thread with its owner's username.

        Raises:
            NotFoundError: If the thread or its owner's user row is missing
        """
        thread = self._threads.get(thread_id)
        if thread is None:
            raise NotFoundError("thread", thread_id)
        username = await self._users.username_of(thread.owner)
        if username is None:
            raise NotFoundError("user", thread.owner)
        return ThreadDetail(
            id=thread.id,
            title=thread.title,
            body=thread.body,
            date=thread.created_at,
            username=username,
        )

    async def verify_title_available(self, title: str) -> None:
        """Raise ThreadTitleTakenError if a thread already uses the title."""
        if any(t.title == title for t in self._threads.values()):
            raise ThreadTitleTakenError(title)
