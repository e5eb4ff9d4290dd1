"""Comment entity.

Comments form a per-thread forest through their ``parent`` link. Deleting a
comment that still has replies turns it into a tombstone: the row stays so the
replies remain attached, but everything identifying the commenter is wiped.
"""

from datetime import datetime

from pydantic import Field

from murmur.domain.model.common import DomainModel
from murmur.domain.value import CommentId, CommentMode, ThreadId


class NewComment(DomainModel):
    """A comment that has not been stored yet.

    The database assigns the id on insert.
    """

    thread_id: ThreadId
    parent: CommentId | None = None
    created: datetime
    modified: datetime | None = None
    mode: CommentMode = CommentMode.VISIBLE
    remote_addr: str | None = None
    text: str
    author: str | None = None
    email: str | None = None
    website: str | None = None
    identity_hash: str = ""


class Comment(NewComment):
    """Comment entity.

    Vote state lives on the comment itself:
    - likes / dislikes: tallies, None is read as zero
    - voters: serialized VoterFilter of everyone who voted, opaque to
      everything except the vote service
    """

    id: CommentId
    likes: int | None = None
    dislikes: int | None = None
    voters: bytes | None = Field(default=None, repr=False)

    @property
    def votes(self) -> int:
        """Net score of the comment."""
        return (self.likes or 0) - (self.dislikes or 0)

    @property
    def is_tombstoned(self) -> bool:
        """Whether the comment was deleted while it still had replies."""
        return self.mode == CommentMode.TOMBSTONED


class InsertedComment(DomainModel):
    """What the frontend needs to place a new comment without reloading."""

    id: CommentId
    parent: CommentId | None
    author: str | None


class CommentEdits(DomainModel):
    """What the frontend needs to refresh an edited comment in place."""

    id: CommentId
    author: str | None
    text: str
    identity_hash: str
