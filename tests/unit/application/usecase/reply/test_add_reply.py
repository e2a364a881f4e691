"""Unit tests for AddReplyUseCase."""

from unittest.mock import AsyncMock

import pytest

from forum.application.usecase.comment import AddCommentUseCase
from forum.application.usecase.reply import AddReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase
from forum.domain.error import ErrorKind, NotFoundError, ValidationError
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _thread_with_comment(env) -> tuple[str, str]:
    add_thread = await env.get(AddThreadUseCase)
    add_comment = await env.get(AddCommentUseCase)
    thread = await add_thread.execute({"title": "T", "body": "B", "owner": "user-1"})
    comment = await add_comment.execute(
        {"threadId": thread.id, "content": "hi", "owner": "user-2"}
    )
    return thread.id, comment.id


class TestAddReplyUseCase:
    """Tests for AddReplyUseCase."""

    @pytest.mark.asyncio
    async def test_add_reply_success(self, unit_env):
        """Replying to an existing comment returns the created reply."""
        # Arrange
        thread_id, comment_id = await _thread_with_comment(unit_env)
        use_case = await unit_env.get(AddReplyUseCase)
        reply_repo = await unit_env.get(ReplyRepository)

        # Act
        added = await use_case.execute(
            {
                "threadId": thread_id,
                "commentId": comment_id,
                "content": "sebuah balasan",
                "owner": "user-1",
            }
        )

        # Assert
        assert added.id.startswith("reply-")
        assert added.content == "sebuah balasan"
        assert added.owner == "user-1"
        replies = await reply_repo.find_by_comment_id(CommentId(comment_id))
        assert [r.id for r in replies] == [added.id]

    @pytest.mark.asyncio
    async def test_thread_checked_before_comment(self, unit_env):
        """A missing thread is reported even when the comment is missing too."""
        use_case = await unit_env.get(AddReplyUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                {
                    "threadId": "thread-missing",
                    "commentId": "comment-missing",
                    "content": "r",
                    "owner": "user-1",
                }
            )

        assert exc_info.value.kind == ErrorKind.THREAD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_comment_not_found(self, unit_env):
        """A missing comment on an existing thread fails without writing."""
        # Arrange
        thread_id, _ = await _thread_with_comment(unit_env)
        use_case = await unit_env.get(AddReplyUseCase)
        reply_repo = await unit_env.get(ReplyRepository)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                {
                    "threadId": thread_id,
                    "commentId": "comment-missing",
                    "content": "r",
                    "owner": "user-1",
                }
            )

        assert exc_info.value.kind == ErrorKind.COMMENT_NOT_FOUND
        assert await reply_repo.find_by_comment_id(CommentId("comment-missing")) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, kind",
        [
            (
                {"threadId": "t", "commentId": "c", "owner": "user-1"},
                ErrorKind.NOT_CONTAIN_NEEDED_PROPERTY,
            ),
            (
                {"threadId": "t", "content": "r", "owner": "user-1"},
                ErrorKind.NOT_CONTAIN_NEEDED_PROPERTY,
            ),
            (
                {"threadId": "t", "commentId": 1, "content": "r", "owner": "user-1"},
                ErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION,
            ),
        ],
    )
    async def test_invalid_payload_never_reaches_repository(self, payload, kind):
        """All four fields are checked before storage is touched."""
        # Arrange
        repositories = [
            AsyncMock(spec=ReplyRepository),
            AsyncMock(spec=CommentRepository),
            AsyncMock(spec=ThreadRepository),
        ]
        use_case = AddReplyUseCase(*repositories)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(payload)

        assert exc_info.value.kind == kind
        assert all(repo.method_calls == [] for repo in repositories)
