"""Domain model entities for murmur."""

from murmur.domain.model.comment import (
    Comment,
    CommentEdits,
    InsertedComment,
    NewComment,
)
from murmur.domain.model.thread import Thread
from murmur.domain.model.voters import VoterFilter

__all__ = [
    "Comment",
    "CommentEdits",
    "InsertedComment",
    "NewComment",
    "Thread",
    "VoterFilter",
]
