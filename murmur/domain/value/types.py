"""Domain value objects for murmur.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from pydantic import field_validator

from murmur.domain.value.common import ValueObject
from murmur.domain.value.identifiers import CommentId


class CommentMode(IntEnum):
    """Lifecycle state of a comment.

    Stored as an integer column.
    """

    VISIBLE = 0
    # Awaiting moderation. Nothing writes this mode yet; it is excluded from
    # counts and listings so a moderation queue can be added later.
    PENDING = 1
    # Soft-deleted but kept because replies still hang off it
    TOMBSTONED = 2


class VoteDirection(str, Enum):
    """Direction of a vote on a comment."""

    UP = "up"
    DOWN = "down"


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CommentSubmission(ValueObject):
    """A new comment as submitted by a reader."""

    text: str
    author: str | None = None
    email: str | None = None
    website: str | None = None
    parent: CommentId | None = None

    @field_validator("author", "email", "website")
    @classmethod
    def normalize_profile(cls, v: str | None) -> str | None:
        """Treat empty profile fields as absent."""
        return _blank_to_none(v)


class CommentEdit(ValueObject):
    """Replacement text and profile for an existing comment."""

    text: str
    author: str | None = None
    email: str | None = None
    website: str | None = None

    @field_validator("author", "email", "website")
    @classmethod
    def normalize_profile(cls, v: str | None) -> str | None:
        """Treat empty profile fields as absent."""
        return _blank_to_none(v)
