"""Vote on comment use case."""

from pydantic import BaseModel

from murmur.domain.service import VoteService
from murmur.domain.value import CommentId, VoteDirection


class VoteCommentRequest(BaseModel):
    """Vote request."""

    comment_id: int
    direction: VoteDirection
    remote_ip: str


class VoteCommentUseCase:
    """Use case for liking or disliking a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteCommentRequest) -> None:
        """Execute vote flow.

        Raises:
            NotFoundError: If the comment does not exist
            AlreadyVotedError: If this address already voted on the comment
        """
        await self.vote_service.vote(
            CommentId(request.comment_id),
            request.remote_ip,
            request.direction,
        )
