"""Get detail thread use case."""

from typing import Any, Mapping

import logfire

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import CommentDetail, CommentView, GetThread, ReplyDetail
from forum.domain.model.common import Entity, RequiredStr
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId


class GetDetailThread(Entity):
    """Payload for reading a thread."""

    __entity_name__ = "GET_DETAIL_THREAD_USE_CASE"

    thread_id: RequiredStr


class GetDetailThreadUseCase(BaseUseCase):
    """Use case for reading a thread with its comments, replies and likes."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize get detail thread use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
            like_repository: Like repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository

    async def execute(self, payload: Mapping[str, Any]) -> GetThread:
        """Execute get detail thread flow.

        Comments and replies keep the creation order returned by the
        repositories. Deleted comments and replies are masked with their
        placeholder text; ids, dates and usernames stay visible.

        Args:
            payload: Raw payload with threadId

        Returns:
            Thread detail with nested comments (empty list if none)

        Raises:
            ValidationError: If threadId is missing or not a string
            NotFoundError: If the thread does not exist or its owner has no user row
        """
        request = GetDetailThread.from_payload(payload)
        thread_id = ThreadId(request.thread_id)

        with logfire.span("get_detail_thread", thread_id=thread_id):
            await self.thread_repository.verify_thread_exists(thread_id)

            thread = await self.thread_repository.get_thread_detail(thread_id)
            comments = await self.comment_repository.find_by_thread_id(thread_id)

            # One AsyncSession per request cannot run statements concurrently,
            # so replies are fetched one comment at a time.
            comment_details = [await self._comment_detail(c) for c in comments]

            logfire.info(
                "Thread detail retrieved",
                thread_id=thread_id,
                comment_count=len(comment_details),
            )

            return GetThread(
                id=thread.id,
                title=thread.title,
                body=thread.body,
                date=thread.date,
                username=thread.username,
                comments=comment_details,
            )

    async def _comment_detail(self, comment: CommentView) -> CommentDetail:
        comment_id = CommentId(comment.id)
        replies = await self.reply_repository.find_by_comment_id(comment_id)
        like_count = await self.like_repository.count(comment_id)

        return CommentDetail(
            id=comment.id,
            username=comment.username,
            date=comment.date,
            content=comment.visible_content,
            like_count=like_count,
            replies=[
                ReplyDetail(
                    id=reply.id,
                    content=reply.visible_content,
                    date=reply.date,
                    username=reply.username,
                )
                for reply in replies
            ],
        )
