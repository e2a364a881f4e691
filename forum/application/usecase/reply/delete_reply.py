"""Delete reply use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.model import DeleteReply
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ReplyId, ThreadId


class DeleteReplyUseCase(BaseUseCase):
    """Use case for soft-deleting a reply."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            reply_repository: Reply repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.reply_repository = reply_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> None:
        """Execute delete reply flow.

        Mirrors DeleteCommentUseCase one level deeper: the reply must exist,
        the requesting user must own it, then it is soft-deleted. Thread and
        comment ids are verified when supplied.

        Args:
            payload: Raw payload with replyId, owner and optional
                threadId/commentId

        Raises:
            ValidationError: If replyId is missing or has the wrong type
            NotFoundError: If the thread, comment or reply does not exist
            NotAuthorizedError: If the user doesn't own the reply
        """
        request = DeleteReply.from_payload(payload)
        reply_id = ReplyId(request.reply_id)

        with logfire.span("delete_reply", reply_id=reply_id, owner=str(request.owner)):
            if request.thread_id is not None:
                await self.thread_repository.verify_thread_exists(
                    ThreadId(request.thread_id)
                )

            if request.comment_id is not None:
                comment = await self.comment_repository.find_by_id(
                    CommentId(request.comment_id)
                )
                if (
                    request.thread_id is not None
                    and comment.thread_id != request.thread_id
                ):
                    raise NotFoundError("comment", request.comment_id)

            reply = await self.reply_repository.find_by_id(reply_id)
            if (
                request.comment_id is not None
                and reply.comment_id != request.comment_id
            ):
                logfire.warn(
                    "Reply does not belong to comment",
                    reply_id=reply_id,
                    comment_id=request.comment_id,
                )
                raise NotFoundError("reply", reply_id)

            await self.reply_repository.verify_owner(reply_id, request.owner)
            await self.reply_repository.soft_delete(reply_id)
            logfire.info("Reply deleted", reply_id=reply_id)
