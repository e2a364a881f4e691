"""Delete comment use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.model import DeleteComment
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> None:
        """Execute delete comment flow.

        Each step must succeed before the next one runs:
        1. Validate payload (commentId; threadId when given)
        2. Verify thread exists, when threadId is given
        3. Verify comment exists (and belongs to the thread, when given)
        4. Verify the requesting user owns the comment
        5. Soft-delete the comment

        Args:
            payload: Raw payload with commentId, owner and optional threadId

        Raises:
            ValidationError: If commentId is missing or has the wrong type
            NotFoundError: If the thread or comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
        """
        request = DeleteComment.from_payload(payload)
        comment_id = CommentId(request.comment_id)

        with logfire.span(
            "delete_comment", comment_id=comment_id, owner=str(request.owner)
        ):
            if request.thread_id is not None:
                await self.thread_repository.verify_thread_exists(
                    ThreadId(request.thread_id)
                )

            comment = await self.comment_repository.find_by_id(comment_id)
            if request.thread_id is not None and comment.thread_id != request.thread_id:
                logfire.warn(
                    "Comment does not belong to thread",
                    comment_id=comment_id,
                    thread_id=request.thread_id,
                )
                raise NotFoundError("comment", comment_id)

            await self.comment_repository.verify_owner(comment_id, request.owner)
            await self.comment_repository.soft_delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
