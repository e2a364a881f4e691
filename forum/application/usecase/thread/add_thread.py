"""Add thread use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedThread, AddThread
from forum.domain.repository import ThreadRepository


class AddThreadUseCase(BaseUseCase):
    """Use case for starting a new thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize add thread use case.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> AddedThread:
        """Execute add thread flow.

        Steps:
        1. Validate payload (title, body, owner)
        2. Reject duplicate titles
        3. Persist the thread

        Args:
            payload: Raw payload with title, body and owner

        Returns:
            The created thread (id, title, owner)

        Raises:
            ValidationError: If a property is missing or has the wrong type
            ThreadTitleTakenError: If a thread with the same title exists
        """
        new_thread = AddThread.from_payload(payload)

        with logfire.span("add_thread", owner=new_thread.owner):
            await self.thread_repository.verify_title_available(new_thread.title)
            added = await self.thread_repository.add_thread(new_thread)
            logfire.info("Thread created", thread_id=added.id, owner=added.owner)
            return added
