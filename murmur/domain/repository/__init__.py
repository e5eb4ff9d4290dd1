"""Repository interfaces for the murmur domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from murmur.domain.repository.comment import MAX_ANCESTOR_WALK, CommentRepository
from murmur.domain.repository.thread import ThreadRepository

__all__ = [
    "MAX_ANCESTOR_WALK",
    "CommentRepository",
    "ThreadRepository",
]
