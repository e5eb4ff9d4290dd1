"""SQLAlchemy table definitions for murmur.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("uri", String(1024), nullable=False, unique=True),  # Path on the blog
    Column("title", Text, nullable=True),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "tid", Integer, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column("parent", Integer, ForeignKey("comments.id"), nullable=True),
    Column("created", TIMESTAMP(timezone=True), nullable=False),
    Column("modified", TIMESTAMP(timezone=True), nullable=True),
    Column("mode", SmallInteger, nullable=False, server_default="0"),
    Column("remote_addr", String(64), nullable=True),
    Column("text", Text, nullable=False),
    Column("author", String(255), nullable=True),
    Column("email", String(255), nullable=True),
    Column("website", String(1024), nullable=True),
    Column("hash", String(56), nullable=False),  # SHA-224 hex digest
    Column("likes", Integer, nullable=True),
    Column("dislikes", Integer, nullable=True),
    Column("voters", LargeBinary, nullable=True),  # Serialized VoterFilter
    CheckConstraint("mode IN (0, 1, 2)", name="ck_comments_mode"),
)

Index("idx_comments_tid", comments_table.c.tid)
Index("idx_comments_parent", comments_table.c.parent)
Index("idx_comments_mode", comments_table.c.mode)
