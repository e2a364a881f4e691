"""In-memory reply repository for testing."""

from typing import Optional

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import AddedReply, NewReply, Reply, ReplyView
from forum.domain.model.common import utc_now
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    REPLY_ID_PREFIX,
    CommentId,
    IdGenerator,
    ReplyId,
    UserId,
    make_id,
    random_id,
)

from .user import InMemoryUserRepository


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(
        self,
        users: Optional[InMemoryUserRepository] = None,
        id_generator: IdGenerator = random_id,
    ) -> None:
        self._replies: dict[ReplyId, Reply] = {}
        self._users = users or InMemoryUserRepository()
        self._id_generator = id_generator

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Persist a new reply on a comment."""
        reply = Reply(
            id=ReplyId(make_id(REPLY_ID_PREFIX, self._id_generator)),
            comment_id=CommentId(new_reply.comment_id),
            owner=UserId(new_reply.owner),
            content=new_reply.content,
        )
        self._replies[reply.id] = reply
        return AddedReply(id=reply.id, content=reply.content, owner=reply.owner)

    async def find_by_id(self, reply_id: ReplyId) -> Reply:
        """Find a reply by ID."""
        reply = self._replies.get(reply_id)
        if reply is None:
            raise NotFoundError("reply", reply_id)
        return reply

    async def find_by_comment_id(self, comment_id: CommentId) -> list[ReplyView]:
        """Find all replies of a comment, oldest first."""
        replies = [r for r in self._replies.values() if r.comment_id == comment_id]
        replies.sort(key=lambda r: r.created_at)
        return [
            ReplyView(
                id=r.id,
                content=r.content,
                is_delete=r.is_delete,
                date=r.created_at,
                username=await self._users.username_of(r.owner),
            )
            for r in replies
        ]

    async def verify_owner(self, reply_id: ReplyId, owner: Optional[str]) -> None:
        """Check that a user owns a reply."""
        reply = await self.find_by_id(reply_id)
        if reply.owner != owner:
            raise NotAuthorizedError("reply", reply_id, owner)

    async def soft_delete(self, reply_id: ReplyId) -> None:
        """Mark a reply as deleted."""
        reply = await self.find_by_id(reply_id)
        self._replies[reply_id] = reply.model_copy(
            update={"is_delete": True, "updated_at": utc_now()}
        )
