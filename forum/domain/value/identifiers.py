"""Strongly typed identifiers for forum domain entities.

Identifiers are prefixed strings (``thread-3f9a...``) so the entity kind is
visible in logs and API payloads. NewType keeps the different ids from being
mixed up in signatures.
"""

from typing import Callable, NewType
from uuid import uuid4

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)
LikeId = NewType("LikeId", str)

THREAD_ID_PREFIX = "thread"
COMMENT_ID_PREFIX = "comment"
REPLY_ID_PREFIX = "reply"
LIKE_ID_PREFIX = "like"

# Produces the random part of an identifier; repositories take one so tests
# can pin ids.
IdGenerator = Callable[[], str]


def random_id() -> str:
    """Return a 16 character random hex string."""
    return uuid4().hex[:16]


def make_id(prefix: str, generator: IdGenerator = random_id) -> str:
    """Build a prefixed identifier, e.g. ``make_id("thread") -> "thread-1a2b..."``."""
    return f"{prefix}-{generator()}"
