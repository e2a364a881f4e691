"""Add comment use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddComment, AddedComment
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import ThreadId


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> AddedComment:
        """Execute add comment flow.

        Steps:
        1. Validate payload (threadId, content, owner)
        2. Verify thread exists
        3. Persist the comment

        Args:
            payload: Raw payload with threadId, content and owner

        Returns:
            The created comment (id, content, owner)

        Raises:
            ValidationError: If a property is missing or has the wrong type
            NotFoundError: If the thread does not exist
        """
        new_comment = AddComment.from_payload(payload)

        with logfire.span(
            "add_comment", thread_id=new_comment.thread_id, owner=new_comment.owner
        ):
            await self.thread_repository.verify_thread_exists(
                ThreadId(new_comment.thread_id)
            )
            added = await self.comment_repository.add_comment(new_comment)
            logfire.info(
                "Comment created", comment_id=added.id, thread_id=new_comment.thread_id
            )
            return added
