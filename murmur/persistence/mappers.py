"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from murmur.domain.model import Comment, NewComment, Thread
from murmur.domain.value import CommentId, CommentMode, ThreadId


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(row["id"]),
        uri=row["uri"],
        title=row.get("title"),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    voters = row.get("voters")
    return Comment(
        id=CommentId(row["id"]),
        thread_id=ThreadId(row["tid"]),
        parent=CommentId(row["parent"]) if row["parent"] is not None else None,
        created=row["created"],
        modified=row.get("modified"),
        mode=CommentMode(row["mode"]),
        remote_addr=row.get("remote_addr"),
        text=row["text"],
        author=row.get("author"),
        email=row.get("email"),
        website=row.get("website"),
        identity_hash=row["hash"],
        likes=row.get("likes"),
        dislikes=row.get("dislikes"),
        voters=bytes(voters) if voters is not None else None,
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert a new comment to a database dict.

    Args:
        comment: Comment that has not been stored yet

    Returns:
        Dict suitable for database insertion
    """
    return {
        "tid": comment.thread_id,
        "parent": comment.parent,
        "created": comment.created,
        "modified": comment.modified,
        "mode": int(comment.mode),
        "remote_addr": comment.remote_addr,
        "text": comment.text,
        "author": comment.author,
        "email": comment.email,
        "website": comment.website,
        "hash": comment.identity_hash,
    }
