"""Add reply use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.model import AddedReply, AddReply, NewReply
from forum.domain.model.common import Entity, RequiredStr
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId


class AddReplyRequest(Entity):
    """Full add reply payload, checked before any storage access."""

    __entity_name__ = "ADD_REPLY_USE_CASE"

    content: RequiredStr
    comment_id: RequiredStr
    thread_id: RequiredStr
    owner: RequiredStr


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize add reply use case.

        Args:
            reply_repository: Reply repository
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.reply_repository = reply_repository
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> AddedReply:
        """Execute add reply flow.

        Steps:
        1. Validate payload (content, commentId, threadId, owner)
        2. Verify thread exists
        3. Verify comment exists and belongs to the thread
        4. Persist the reply

        Args:
            payload: Raw payload with content, commentId, threadId and owner

        Returns:
            The created reply (id, content, owner)

        Raises:
            ValidationError: If a property is missing or has the wrong type
            NotFoundError: If the thread or comment does not exist
        """
        request = AddReplyRequest.from_payload(payload)
        reply = AddReply(content=request.content)
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)

        with logfire.span(
            "add_reply", thread_id=thread_id, comment_id=comment_id, owner=request.owner
        ):
            await self.thread_repository.verify_thread_exists(thread_id)

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment.thread_id != thread_id:
                logfire.warn(
                    "Reply target comment does not belong to thread",
                    comment_id=comment_id,
                    thread_id=thread_id,
                )
                raise NotFoundError("comment", comment_id)

            added = await self.reply_repository.add_reply(
                NewReply(
                    content=reply.content,
                    comment_id=comment_id,
                    owner=request.owner,
                )
            )
            logfire.info("Reply created", reply_id=added.id, comment_id=comment_id)
            return added
