"""Unit tests for the in-memory repositories.

The in-memory repositories back every unit test, so they must follow the
same contracts as the PostgreSQL ones: prefixed ids, creation-order reads,
not-found and ownership errors.
"""

import pytest

from forum.domain.error import (
    ErrorKind,
    NotAuthorizedError,
    NotFoundError,
    ThreadTitleTakenError,
)
from forum.domain.model import AddComment, AddThread, NewReply
from forum.domain.value import CommentId, ThreadId, UserId
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from tests.harness import seed_user, sequential_ids


@pytest.fixture
def users():
    return InMemoryUserRepository()


class TestInMemoryThreadRepository:
    """Tests for InMemoryThreadRepository."""

    @pytest.mark.asyncio
    async def test_add_thread_generates_prefixed_id(self, users):
        """New thread ids use the thread prefix and the injected generator."""
        # Arrange
        ids = sequential_ids()
        repo = InMemoryThreadRepository(users, id_generator=lambda: next(ids))

        # Act
        added = await repo.add_thread(
            AddThread(title="A thread", body="Body", owner="user-1")
        )

        # Assert
        assert added.id == "thread-001"
        assert added.title == "A thread"
        assert added.owner == "user-1"

    @pytest.mark.asyncio
    async def test_verify_thread_exists_raises_not_found(self, users):
        repo = InMemoryThreadRepository(users)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.verify_thread_exists(ThreadId("thread-missing"))

        assert exc_info.value.kind == ErrorKind.THREAD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_thread_detail_resolves_username(self, users):
        """Thread detail carries the owner's username."""
        # Arrange
        await seed_user(users, "user-1", "dicoding")
        repo = InMemoryThreadRepository(users)
        added = await repo.add_thread(AddThread(title="A", body="B", owner="user-1"))

        # Act
        detail = await repo.get_thread_detail(ThreadId(added.id))

        # Assert
        assert detail.username == "dicoding"
        assert detail.body == "B"

    @pytest.mark.asyncio
    async def test_get_thread_detail_unknown_owner(self, users):
        """An owner missing from the user store is reported as not found."""
        repo = InMemoryThreadRepository(users)
        added = await repo.add_thread(AddThread(title="A", body="B", owner="ghost"))

        with pytest.raises(NotFoundError) as exc_info:
            await repo.get_thread_detail(ThreadId(added.id))

        assert exc_info.value.kind == ErrorKind.USER_NOT_FOUND
        assert exc_info.value.identifier == "ghost"
        assert detail.date.tzinfo is not None

    @pytest.mark.asyncio
    async def test_verify_title_available(self, users):
        """A taken title raises a conflict error."""
        # Arrange
        repo = InMemoryThreadRepository(users)
        await repo.add_thread(AddThread(title="Taken", body="B", owner="user-1"))

        # Act & Assert
        await repo.verify_title_available("Free")
        with pytest.raises(ThreadTitleTakenError) as exc_info:
            await repo.verify_title_available("Taken")
        assert exc_info.value.kind == ErrorKind.THREAD_TITLE_TAKEN


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_by_thread_id_keeps_creation_order(self, users):
        """Comments come back oldest first, not sorted by id or content."""
        # Arrange
        suffixes = iter(["zzz", "aaa", "mmm", "bbb"])
        repo = InMemoryCommentRepository(users, id_generator=lambda: next(suffixes))
        for content in ["third? no, first", "second", "last"]:
            await repo.add_comment(
                AddComment(thread_id="thread-1", content=content, owner="user-1")
            )
        await repo.add_comment(
            AddComment(thread_id="thread-2", content="other", owner="user-1")
        )

        # Act
        comments = await repo.find_by_thread_id(ThreadId("thread-1"))

        # Assert
        assert [c.id for c in comments] == [
            "comment-zzz",
            "comment-aaa",
            "comment-mmm",
        ]
        assert [c.content for c in comments] == ["third? no, first", "second", "last"]

    @pytest.mark.asyncio
    async def test_find_by_thread_id_empty(self, users):
        """A thread without comments yields an empty list, not an error."""
        repo = InMemoryCommentRepository(users)

        assert await repo.find_by_thread_id(ThreadId("thread-1")) == []

    @pytest.mark.asyncio
    async def test_verify_owner(self, users):
        """Only the owner passes the ownership check."""
        # Arrange
        repo = InMemoryCommentRepository(users)
        added = await repo.add_comment(
            AddComment(thread_id="thread-1", content="hi", owner="user-2")
        )

        # Act & Assert
        await repo.verify_owner(CommentId(added.id), "user-2")
        with pytest.raises(NotAuthorizedError):
            await repo.verify_owner(CommentId(added.id), "user-3")

    @pytest.mark.asyncio
    async def test_soft_delete_is_idempotent(self, users):
        """Deleting twice keeps the comment flagged."""
        # Arrange
        repo = InMemoryCommentRepository(users)
        added = await repo.add_comment(
            AddComment(thread_id="thread-1", content="hi", owner="user-2")
        )

        # Act
        await repo.soft_delete(CommentId(added.id))
        await repo.soft_delete(CommentId(added.id))

        # Assert
        comment = await repo.find_by_id(CommentId(added.id))
        assert comment.is_delete is True
        assert comment.content == "hi"

    @pytest.mark.asyncio
    async def test_soft_delete_missing_comment(self, users):
        repo = InMemoryCommentRepository(users)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.soft_delete(CommentId("comment-missing"))

        assert exc_info.value.kind == ErrorKind.COMMENT_NOT_FOUND


class TestInMemoryReplyRepository:
    """Tests for InMemoryReplyRepository."""

    @pytest.mark.asyncio
    async def test_add_and_find_replies(self, users):
        """Replies are scoped by comment and carry the reply prefix."""
        # Arrange
        await seed_user(users, "user-1", "johndoe")
        repo = InMemoryReplyRepository(users)

        # Act
        first = await repo.add_reply(
            NewReply(content="r1", comment_id="comment-1", owner="user-1")
        )
        await repo.add_reply(
            NewReply(content="r2", comment_id="comment-1", owner="user-1")
        )
        await repo.add_reply(
            NewReply(content="other", comment_id="comment-2", owner="user-1")
        )
        replies = await repo.find_by_comment_id(CommentId("comment-1"))

        # Assert
        assert first.id.startswith("reply-")
        assert [r.content for r in replies] == ["r1", "r2"]
        assert replies[0].username == "johndoe"

    @pytest.mark.asyncio
    async def test_find_missing_reply(self, users):
        repo = InMemoryReplyRepository(users)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.find_by_id("reply-missing")

        assert exc_info.value.kind == ErrorKind.REPLY_NOT_FOUND


class TestInMemoryLikeRepository:
    """Tests for InMemoryLikeRepository."""

    @pytest.mark.asyncio
    async def test_add_find_remove_count(self):
        # Arrange
        repo = InMemoryLikeRepository()
        comment_id = CommentId("comment-1")

        # Act
        like = await repo.add(comment_id, UserId("user-1"))
        await repo.add(comment_id, UserId("user-2"))

        # Assert
        assert like.id.startswith("like-")
        assert await repo.find(comment_id, UserId("user-1")) == like
        assert await repo.count(comment_id) == 2

        await repo.remove(comment_id, UserId("user-1"))
        assert await repo.find(comment_id, UserId("user-1")) is None
        assert await repo.count(comment_id) == 1

    @pytest.mark.asyncio
    async def test_duplicate_add_keeps_one_row(self):
        """A second add for the same user and comment returns the first like."""
        repo = InMemoryLikeRepository()

        first = await repo.add(CommentId("comment-1"), UserId("user-1"))
        second = await repo.add(CommentId("comment-1"), UserId("user-1"))

        assert second.id == first.id
        assert await repo.count(CommentId("comment-1")) == 1
