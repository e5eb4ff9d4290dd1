"""Vote use cases."""

from .vote_comment import VoteCommentRequest, VoteCommentUseCase

__all__ = [
    "VoteCommentRequest",
    "VoteCommentUseCase",
]
