"""In-memory comment repository for testing."""

from collections.abc import Collection
from datetime import datetime
from typing import Optional

from murmur.domain.model.comment import Comment, NewComment
from murmur.domain.repository.comment import MAX_ANCESTOR_WALK, CommentRepository
from murmur.domain.value import CommentId, CommentMode, VoteDirection

from .thread import InMemoryThreadRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Thread paths are resolved through the thread repository it shares a
    store with, mirroring the join done in SQL.
    """

    def __init__(self, threads: InMemoryThreadRepository) -> None:
        self._threads = threads
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1

    def _in_thread(
        self, uri: str, modes: Collection[CommentMode]
    ) -> list[Comment]:
        thread_ids = self._threads.thread_ids_for_uri(uri)
        comments = [
            c
            for c in self._comments.values()
            if c.thread_id in thread_ids and c.mode in modes
        ]
        comments.sort(key=lambda c: c.id)
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_thread_uri(
        self,
        uri: str,
        modes: Collection[CommentMode],
    ) -> list[Comment]:
        """Find every comment of a thread in one of the given modes."""
        return self._in_thread(uri, modes)

    async def count_by_thread_uri(
        self,
        uri: str,
        modes: Collection[CommentMode],
    ) -> int:
        """Count comments of a thread in one of the given modes."""
        return len(self._in_thread(uri, modes))

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        return sum(1 for c in self._comments.values() if c.parent == comment_id)

    async def ancestor_depth(self, comment_id: CommentId) -> Optional[int]:
        """Walk up the parent chain, counting the comment itself."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        depth = 1
        while comment.parent is not None and depth < MAX_ANCESTOR_WALK:
            parent = self._comments.get(comment.parent)
            if parent is None:
                break
            comment = parent
            depth += 1
        return depth

    async def insert(self, comment: NewComment) -> Comment:
        """Store a new comment with the next id."""
        stored = Comment(id=CommentId(self._next_id), **comment.model_dump())
        self._comments[stored.id] = stored
        self._next_id += 1
        return stored

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
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(
            update={
                "text": text,
                "author": author,
                "email": email,
                "website": website,
                "identity_hash": identity_hash,
                "modified": modified,
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def tombstone(self, comment_id: CommentId) -> None:
        """Mark a comment as tombstoned and scrub its personal data."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return

        self._comments[comment_id] = comment.model_copy(
            update={
                "mode": CommentMode.TOMBSTONED,
                "remote_addr": None,
                "text": "",
                "author": None,
                "email": None,
                "website": None,
                "identity_hash": "",
                "likes": None,
                "dislikes": None,
                "voters": None,
            }
        )

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_childless_tombstones(self) -> int:
        """Remove tombstones that nothing replies to, in a single pass."""
        parents = {c.parent for c in self._comments.values() if c.parent is not None}
        doomed = [
            c.id
            for c in self._comments.values()
            if c.mode == CommentMode.TOMBSTONED and c.id not in parents
        ]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def find_for_vote(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment to vote on; there is nothing to lock in memory."""
        return self._comments.get(comment_id)

    async def record_vote(
        self,
        comment_id: CommentId,
        voters: bytes,
        direction: VoteDirection,
    ) -> None:
        """Store voters and bump the matching tally."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return

        if direction == VoteDirection.UP:
            tally = {"likes": (comment.likes or 0) + 1}
        else:
            tally = {"dislikes": (comment.dislikes or 0) + 1}
        self._comments[comment_id] = comment.model_copy(
            update={"voters": voters, **tally}
        )
