"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
)
from forum.application.usecase.like import LikeCommentUseCase
from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase, GetDetailThreadUseCase
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped so they share the request's session and
    transaction with the repositories they receive.
    """

    scope = Scope.REQUEST

    # Thread use cases
    @provide
    def get_add_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> AddThreadUseCase:
        """Provide add thread use case."""
        return AddThreadUseCase(thread_repository=thread_repository)

    @provide
    def get_detail_thread_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> GetDetailThreadUseCase:
        """Provide get thread detail use case."""
        return GetDetailThreadUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
        )

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    # Reply use cases
    @provide
    def get_add_reply_use_case(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            reply_repository=reply_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_delete_reply_use_case(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            reply_repository=reply_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    # Like use cases
    @provide
    def get_like_comment_use_case(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            like_repository=like_repository,
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )
