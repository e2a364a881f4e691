"""Thread repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.thread import AddedThread, AddThread, ThreadDetail
from forum.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_thread(self, new_thread: AddThread) -> AddedThread:
        """Persist a new thread.

        Args:
            new_thread: Validated thread payload

        Returns:
            The created thread projection (id, title, owner)
        """
        pass

    @abstractmethod
    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: The thread's unique identifier

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass

    @abstractmethod
    async def get_thread_detail(self, thread_id: ThreadId) -> ThreadDetail:
        """Get a thread joined with its owner's username.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            Thread detail projection

        Raises:
            NotFoundError: If the thread does not exist, or USER_NOT_FOUND if
                its owner has no user row
        """
        pass

    @abstractmethod
    async def verify_title_available(self, title: str) -> None:
        """Check that no thread uses the given title.

        Args:
            title: Proposed thread title

        Raises:
            ThreadTitleTakenError: If a thread with this title exists
        """
        pass
