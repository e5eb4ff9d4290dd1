"""Strongly typed identifiers for murmur domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Both are integer primary keys assigned by the database
ThreadId = NewType("ThreadId", int)
CommentId = NewType("CommentId", int)
