"""Domain services."""

from .base import Service
from .comment_service import CommentService, authorize_edit
from .identity import display_author, identity_hash
from .nesting import NestingPolicy
from .notification_service import Notifier
from .thread_service import CommentNode, SiteClient, ThreadAssembler, ThreadService
from .vote_service import VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "NestingPolicy",
    "Notifier",
    "Service",
    "SiteClient",
    "ThreadAssembler",
    "ThreadService",
    "VoteService",
    "authorize_edit",
    "display_author",
    "identity_hash",
]
