"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from datetime import datetime
from typing import List, Optional

from murmur.domain.model.comment import Comment, NewComment
from murmur.domain.value import CommentId, CommentMode, VoteDirection

# Upper bound on parent hops when measuring depth, so a corrupted parent
# cycle cannot hang the walk
MAX_ANCESTOR_WALK = 1000


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread_uri(
        self,
        uri: str,
        modes: Collection[CommentMode],
    ) -> List[Comment]:
        """Find every comment of a thread in one of the given modes.

        Args:
            uri: Path of the thread
            modes: Modes to include

        Returns:
            Comments ordered by ascending id
        """
        pass

    @abstractmethod
    async def count_by_thread_uri(
        self,
        uri: str,
        modes: Collection[CommentMode],
    ) -> int:
        """Count comments of a thread in one of the given modes.

        Args:
            uri: Path of the thread
            modes: Modes to include

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment, whatever their mode.

        Args:
            comment_id: The parent comment ID

        Returns:
            Number of comments whose parent is ``comment_id``
        """
        pass

    @abstractmethod
    async def ancestor_depth(self, comment_id: CommentId) -> Optional[int]:
        """Measure how deep a comment sits in its tree.

        Depth counts every comment from ``comment_id`` up to its root,
        inclusive, so a root comment has depth 1. The walk stops after
        MAX_ANCESTOR_WALK hops.

        Args:
            comment_id: The comment to measure

        Returns:
            The depth, or None if the comment does not exist
        """
        pass

    @abstractmethod
    async def insert(self, comment: NewComment) -> Comment:
        """Store a new comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment with its database-assigned id
        """
        pass

    @abstractmethod
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
        """Replace the text and commenter profile of a comment.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def tombstone(self, comment_id: CommentId) -> None:
        """Mark a comment as tombstoned and scrub its personal data.

        Clears text, author, email, website, identity hash, remote address,
        vote tallies and voters. Keeps id and parent.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Physically remove a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_childless_tombstones(self) -> int:
        """Remove tombstoned comments that no comment replies to.

        Single pass: a tombstone whose last child is removed by this call is
        left for the next call.

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def find_for_vote(self, comment_id: CommentId) -> Optional[Comment]:
        """Load a comment to apply a vote to it.

        Implementations lock the row until the current transaction ends so
        concurrent votes on the same comment are applied one after another.

        Args:
            comment_id: The comment ID

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def record_vote(
        self,
        comment_id: CommentId,
        voters: bytes,
        direction: VoteDirection,
    ) -> None:
        """Store the updated voters blob and bump the matching tally.

        Both changes are applied in a single statement.

        Args:
            comment_id: The comment ID
            voters: Serialized VoterFilter including the new voter
            direction: Whether to increment likes or dislikes
        """
        pass
