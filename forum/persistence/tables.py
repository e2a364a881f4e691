"""SQLAlchemy table definitions for the forum.

Repositories query these tables with SQLAlchemy Core; rows are mapped to
immutable domain models in ``forum.persistence.mappers``.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the authentication service, read for usernames)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("fullname", Text, nullable=True),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("title", Text, nullable=False),  # Uniqueness checked, not constrained
    Column("body", Text, nullable=False),
    Column(
        "owner", String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_threads_title", threads_table.c.title)
Index("idx_threads_owner", threads_table.c.owner)

# ============================================================================
# COMMENT_THREADS TABLE (comments on a thread)
# ============================================================================
comments_table = Table(
    "comment_threads",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("content", Text, nullable=False),
    Column(
        "thread_id",
        String(50),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner", String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("is_delete", Boolean, nullable=False, server_default=false()),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_comment_threads_thread_id", comments_table.c.thread_id)
Index("idx_comment_threads_created_at", comments_table.c.created_at)

# ============================================================================
# REPLIES TABLE (replies to a comment)
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("content", Text, nullable=False),
    Column(
        "comment_id",
        String(50),
        ForeignKey("comment_threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner", String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("is_delete", Boolean, nullable=False, server_default=false()),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_replies_comment_id", replies_table.c.comment_id)
Index("idx_replies_created_at", replies_table.c.created_at)

# ============================================================================
# LIKES_COMMENT TABLE (one row per user per liked comment)
# ============================================================================
likes_table = Table(
    "likes_comment",
    metadata,
    Column("id", String(50), primary_key=True),
    Column(
        "user_id",
        String(50),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "comment_id",
        String(50),
        ForeignKey("comment_threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_likes_comment_user"),
)

Index("idx_likes_comment_comment_id", likes_table.c.comment_id)
