"""initial_schema

Create the murmur schema:
- Threads (one per blog page, keyed by path)
- Comments (reply forest per thread, with tombstones and vote state)

Revision ID: 3f1c9a7d2e40
Revises:
Create Date: 2026-10-19 10:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "threads",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uri", sa.String(length=1024), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("uri"),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tid", sa.Integer(), nullable=False),
        sa.Column("parent", sa.Integer(), nullable=True),
        sa.Column("created", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("modified", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("mode", sa.SmallInteger(), server_default="0", nullable=False),
        sa.Column("remote_addr", sa.String(length=64), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("website", sa.String(length=1024), nullable=True),
        sa.Column("hash", sa.String(length=56), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=True),
        sa.Column("dislikes", sa.Integer(), nullable=True),
        sa.Column("voters", sa.LargeBinary(), nullable=True),
        sa.ForeignKeyConstraint(["tid"], ["threads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    # 0 visible, 1 pending, 2 tombstoned
    op.create_check_constraint("ck_comments_mode", "comments", "mode IN (0, 1, 2)")

    op.create_index("idx_comments_tid", "comments", ["tid"])
    op.create_index("idx_comments_parent", "comments", ["parent"])
    op.create_index("idx_comments_mode", "comments", ["mode"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_mode", table_name="comments")
    op.drop_index("idx_comments_parent", table_name="comments")
    op.drop_index("idx_comments_tid", table_name="comments")
    op.drop_table("comments")
    op.drop_table("threads")
