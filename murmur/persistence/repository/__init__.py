"""PostgreSQL repository implementations."""

from murmur.persistence.repository.comment import PostgresCommentRepository
from murmur.persistence.repository.thread import PostgresThreadRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresThreadRepository",
]
