"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire

from murmur.domain.model import Comment
from murmur.domain.value import CommentId, CommentMode, ThreadId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: int,
    thread_id: int = 1,
    parent: int | None = None,
    mode: CommentMode = CommentMode.VISIBLE,
    text: str = "comment",
    created: datetime | None = None,
    **kwargs,
) -> Comment:
    """Build a stored comment for arranging repository state directly.

    Args:
        comment_id: Comment ID
        thread_id: Owning thread
        parent: Parent comment ID
        mode: Comment mode
        text: Comment text
        created: Creation time, defaults to now
        **kwargs: Any other Comment field

    Returns:
        Comment ready for SeedableCommentRepository.put
    """
    return Comment(
        id=CommentId(comment_id),
        thread_id=ThreadId(thread_id),
        parent=CommentId(parent) if parent is not None else None,
        created=created or datetime.now(timezone.utc),
        mode=mode,
        text=text,
        **kwargs,
    )
