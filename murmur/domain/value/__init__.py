"""Domain value objects for murmur."""

from murmur.domain.value.identifiers import CommentId, ThreadId
from murmur.domain.value.types import (
    CommentEdit,
    CommentMode,
    CommentSubmission,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ThreadId",
    # Types
    "CommentEdit",
    "CommentMode",
    "CommentSubmission",
    "VoteDirection",
]
