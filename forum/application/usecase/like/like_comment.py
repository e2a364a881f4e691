"""Like comment use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.model import LikeComment, ToggledLike
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId, UserId


class LikeCommentUseCase(BaseUseCase):
    """Use case for toggling a user's like on a comment.

    Every call flips the state: a like is added when absent and removed when
    present. There is no "set liked" operation, so callers track their own
    state (or read the count).
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize like comment use case.

        Args:
            like_repository: Like repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> ToggledLike:
        """Execute like toggle flow.

        Args:
            payload: Raw payload with commentId, threadId and userId

        Returns:
            The comment id and whether it is liked after the toggle

        Raises:
            ValidationError: If a property is missing or has the wrong type
            NotFoundError: If the thread or comment does not exist
        """
        request = LikeComment.from_payload(payload)
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        with logfire.span("like_comment", comment_id=comment_id, user_id=user_id):
            await self.thread_repository.verify_thread_exists(thread_id)

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment.thread_id != thread_id:
                raise NotFoundError("comment", comment_id)

            existing = await self.like_repository.find(comment_id, user_id)
            if existing is not None:
                await self.like_repository.remove(comment_id, user_id)
                logfire.info("Comment unliked", comment_id=comment_id, user_id=user_id)
                return ToggledLike(comment_id=comment_id, liked=False)

            await self.like_repository.add(comment_id, user_id)
            logfire.info("Comment liked", comment_id=comment_id, user_id=user_id)
            return ToggledLike(comment_id=comment_id, liked=True)
