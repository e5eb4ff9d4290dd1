"""Comment domain service."""

import secrets
from datetime import datetime, timezone

import logfire

from murmur.domain.error import (
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
)
from murmur.domain.model import Comment, CommentEdits, InsertedComment, NewComment
from murmur.domain.repository import CommentRepository
from murmur.domain.value import (
    CommentEdit,
    CommentId,
    CommentMode,
    CommentSubmission,
    ThreadId,
)

from .base import Service
from .identity import display_author, identity_hash
from .nesting import NestingPolicy

# Modes that count towards a thread's comment total
COUNTED_MODES = (CommentMode.VISIBLE, CommentMode.TOMBSTONED)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def authorize_edit(
    stored_hash: str,
    claimed_hash: str,
    created: datetime,
    modified: datetime | None,
    offset_seconds: float,
    now: datetime | None = None,
) -> None:
    """Check that a commenter may still edit or delete their comment.

    Both must hold: the claimed identity hash matches the stored one, and
    less than ``offset_seconds`` have passed since the comment was created or
    last modified.

    Raises:
        UnauthorizedError: If either condition fails
    """
    now = now or _utcnow()
    last_touched = max(modified, created) if modified else created
    if not stored_hash or not secrets.compare_digest(
        stored_hash.encode("utf-8"), claimed_hash.encode("utf-8")
    ):
        raise UnauthorizedError("identity hash mismatch")
    if (now - last_touched).total_seconds() >= offset_seconds:
        raise UnauthorizedError("edit window has closed")


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        nesting_policy: NestingPolicy,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            nesting_policy: Policy flattening replies beyond the nesting limit
        """
        self.comment_repository = comment_repository
        self.nesting_policy = nesting_policy

    async def count(self, thread_uri: str) -> int:
        """Count displayable comments on a thread.

        Args:
            thread_uri: Path of the thread

        Returns:
            Number of visible and tombstoned comments
        """
        with logfire.span("comment_service.count", thread_uri=thread_uri):
            return await self.comment_repository.count_by_thread_uri(
                thread_uri, COUNTED_MODES
            )

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def _check_parent(self, thread_id: ThreadId, parent_id: CommentId) -> None:
        """Replies must attach to an existing comment on the same thread."""
        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None or parent.thread_id != thread_id:
            logfire.warn(
                "Reply parent not on thread",
                thread_id=thread_id,
                parent=parent_id,
            )
            raise NotFoundError("Comment", str(parent_id))

    async def insert(
        self,
        thread_id: ThreadId,
        submission: CommentSubmission,
        remote_ip: str | None,
        nesting_limit: int,
    ) -> InsertedComment:
        """Store a new comment on a thread.

        Args:
            thread_id: Owning thread
            submission: Text and optional profile of the commenter
            remote_ip: Client address, used for the hash when no profile is given
            nesting_limit: Maximum depth a reply may attach to

        Returns:
            Projection of the stored comment for the frontend

        Raises:
            NotFoundError: If the parent does not exist on this thread
            StorageWriteError: If the comment could not be stored
            InvariantViolationError: If the stored comment cannot be read back
        """
        with logfire.span(
            "comment_service.insert",
            thread_id=thread_id,
            parent=submission.parent,
        ):
            if submission.parent is not None:
                await self._check_parent(thread_id, submission.parent)

            parent = await self.nesting_policy.resolve_parent(
                submission.parent, nesting_limit
            )
            new_comment = NewComment(
                thread_id=thread_id,
                parent=parent,
                created=_utcnow(),
                modified=None,
                mode=CommentMode.VISIBLE,
                remote_addr=remote_ip or None,
                text=submission.text,
                author=submission.author,
                email=submission.email,
                website=submission.website,
                identity_hash=identity_hash(
                    submission.author, submission.email, submission.website, remote_ip
                ),
            )
            saved = await self.comment_repository.insert(new_comment)

            stored = await self.comment_repository.find_by_id(saved.id)
            if stored is None:
                raise InvariantViolationError(
                    f"Comment {saved.id} missing right after insert"
                )

            logfire.info(
                "Comment created",
                comment_id=stored.id,
                thread_id=thread_id,
                parent=stored.parent,
            )
            return InsertedComment(
                id=stored.id,
                parent=stored.parent,
                author=display_author(stored.author, stored.email, stored.website),
            )

    async def update(
        self,
        comment_id: CommentId,
        edit: CommentEdit,
        remote_ip: str | None,
    ) -> CommentEdits:
        """Rewrite the text and profile of a comment.

        Callers must check :meth:`authorize` first; this method does not.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.update", comment_id=comment_id):
            updated = await self.comment_repository.update_content(
                comment_id,
                text=edit.text,
                author=edit.author,
                email=edit.email,
                website=edit.website,
                identity_hash=identity_hash(
                    edit.author, edit.email, edit.website, remote_ip
                ),
                modified=_utcnow(),
            )
            if updated is None:
                logfire.warn("Comment not found for update", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment updated", comment_id=comment_id)
            return CommentEdits(
                id=updated.id,
                author=display_author(updated.author, updated.email, updated.website),
                text=updated.text,
                identity_hash=updated.identity_hash,
            )

    async def authorize(
        self,
        comment_id: CommentId,
        claimed_hash: str,
        edit_timeout: float,
    ) -> None:
        """Check that the requester may edit or delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
            UnauthorizedError: If the hash differs or the edit window closed
        """
        comment = await self.get_comment_by_id(comment_id)
        try:
            authorize_edit(
                comment.identity_hash,
                claimed_hash,
                comment.created,
                comment.modified,
                edit_timeout,
            )
        except UnauthorizedError as e:
            logfire.warn(
                "Unauthorized comment modification",
                comment_id=comment_id,
                reason=e.reason,
            )
            raise UnauthorizedError(e.reason, comment_id) from None

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment.

        A comment without replies is removed outright. A comment with replies
        becomes a tombstone so the replies stay in place. Afterwards every
        tombstone left without replies is removed, repeating until none is
        left, so deleting the last reply of a tombstone chain collapses the
        whole chain.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete", comment_id=comment_id):
            await self.get_comment_by_id(comment_id)

            children = await self.comment_repository.count_children(comment_id)
            if children == 0:
                await self.comment_repository.delete(comment_id)
                logfire.info("Comment deleted", comment_id=comment_id)
            else:
                await self.comment_repository.tombstone(comment_id)
                logfire.info(
                    "Comment tombstoned", comment_id=comment_id, children=children
                )

            swept = 0
            while True:
                removed = await self.comment_repository.delete_childless_tombstones()
                if not removed:
                    break
                swept += removed
            if swept:
                logfire.info("Swept childless tombstones", count=swept)
