"""PostgreSQL implementation of Comment repository."""

from collections.abc import Collection
from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Integer, delete, func, insert, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from murmur.domain.error import StorageReadError, StorageWriteError
from murmur.domain.model import Comment, NewComment
from murmur.domain.repository import CommentRepository
from murmur.domain.repository.comment import MAX_ANCESTOR_WALK
from murmur.domain.value import CommentId, CommentMode, VoteDirection
from murmur.persistence.mappers import new_comment_to_dict, row_to_comment
from murmur.persistence.repository._errors import storage_errors
from murmur.persistence.tables import comments_table, threads_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _thread_comments(self, uri: str, modes: Collection[CommentMode]):
        """Join condition shared by the per-thread queries."""
        return (
            comments_table.join(
                threads_table, comments_table.c.tid == threads_table.c.id
            ),
            [
                threads_table.c.uri == uri,
                comments_table.c.mode.in_([int(m) for m in modes]),
            ],
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with storage_errors("comment.find_by_id", StorageReadError):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()) if row else None

    async def find_by_thread_uri(
        self,
        uri: str,
        modes: Collection[CommentMode],
    ) -> List[Comment]:
        """Find every comment of a thread in one of the given modes."""
        with storage_errors("comment.find_by_thread_uri", StorageReadError):
            joined, conditions = self._thread_comments(uri, modes)
            stmt = (
                select(comments_table)
                .select_from(joined)
                .where(*conditions)
                .order_by(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_thread_uri(
        self,
        uri: str,
        modes: Collection[CommentMode],
    ) -> int:
        """Count comments of a thread in one of the given modes."""
        with storage_errors("comment.count_by_thread_uri", StorageReadError):
            joined, conditions = self._thread_comments(uri, modes)
            stmt = select(func.count()).select_from(joined).where(*conditions)
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        with storage_errors("comment.count_children", StorageReadError):
            stmt = (
                select(func.count())
                .select_from(comments_table)
                .where(comments_table.c.parent == comment_id)
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def ancestor_depth(self, comment_id: CommentId) -> Optional[int]:
        """Measure depth with a recursive walk up the parent chain."""
        with storage_errors("comment.ancestor_depth", StorageReadError):
            ancestors = (
                select(
                    comments_table.c.id,
                    comments_table.c.parent,
                    literal(1, type_=Integer).label("depth"),
                )
                .where(comments_table.c.id == comment_id)
                .cte("ancestors", recursive=True)
            )
            parent = comments_table.alias("parent_comment")
            ancestors = ancestors.union_all(
                select(
                    parent.c.id,
                    parent.c.parent,
                    (ancestors.c.depth + 1).label("depth"),
                )
                .where(parent.c.id == ancestors.c.parent)
                .where(ancestors.c.depth < MAX_ANCESTOR_WALK)
            )
            stmt = select(func.max(ancestors.c.depth))
            result = await self.session.execute(stmt)
            return result.scalar()

    async def insert(self, comment: NewComment) -> Comment:
        """Store a new comment and return it with its id."""
        with storage_errors("comment.insert", StorageWriteError):
            stmt = (
                insert(comments_table)
                .values(**new_comment_to_dict(comment))
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.one()
            await self.session.flush()
            return row_to_comment(row._asdict())

    async def update_content(
        self,
        comment_id: CommentId,
        text: str,
        author: Optional[str],
        email: Optional[str],
        website: Optional[str],
        identity_hash: str,
        modified: datetime,
    ) -> Optional[Comment]:
        """Replace the text and commenter profile of a comment."""
        with storage_errors("comment.update_content", StorageWriteError):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(
                    text=text,
                    author=author,
                    email=email,
                    website=website,
                    hash=identity_hash,
                    modified=modified,
                )
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                return None

            await self.session.flush()
            return row_to_comment(row._asdict())

    async def tombstone(self, comment_id: CommentId) -> None:
        """Mark a comment as tombstoned and scrub its personal data."""
        with storage_errors("comment.tombstone", StorageWriteError):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(
                    mode=int(CommentMode.TOMBSTONED),
                    remote_addr=None,
                    text="",
                    author=None,
                    email=None,
                    website=None,
                    hash="",
                    likes=None,
                    dislikes=None,
                    voters=None,
                )
            )
            await self.session.execute(stmt)
            await self.session.flush()

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        with storage_errors("comment.delete", StorageWriteError):
            stmt = delete(comments_table).where(comments_table.c.id == comment_id)
            await self.session.execute(stmt)
            await self.session.flush()

    async def delete_childless_tombstones(self) -> int:
        """Remove tombstones that nothing replies to."""
        with storage_errors("comment.delete_childless_tombstones", StorageWriteError):
            parents = select(comments_table.c.parent).where(
                comments_table.c.parent.is_not(None)
            )
            stmt = (
                delete(comments_table)
                .where(comments_table.c.mode == int(CommentMode.TOMBSTONED))
                .where(comments_table.c.id.not_in(parents))
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            removed = result.rowcount or 0
            if removed:
                logfire.debug("Removed childless tombstones", count=removed)
            return removed

    async def find_for_vote(self, comment_id: CommentId) -> Optional[Comment]:
        """Load a comment with a row lock held until the transaction ends."""
        with storage_errors("comment.find_for_vote", StorageReadError):
            stmt = (
                select(comments_table)
                .where(comments_table.c.id == comment_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()) if row else None

    async def record_vote(
        self,
        comment_id: CommentId,
        voters: bytes,
        direction: VoteDirection,
    ) -> None:
        """Store voters and bump the tally in one UPDATE."""
        with storage_errors("comment.record_vote", StorageWriteError):
            tally = (
                comments_table.c.likes
                if direction == VoteDirection.UP
                else comments_table.c.dislikes
            )
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values({"voters": voters, tally.name: func.coalesce(tally, 0) + 1})
            )
            await self.session.execute(stmt)
            await self.session.flush()
