"""Vote domain service."""

import logfire

from murmur.domain.error import AlreadyVotedError, NotFoundError
from murmur.domain.model import VoterFilter
from murmur.domain.model.voters import DEFAULT_EXPECTED_VOTERS, DEFAULT_FP_RATE
from murmur.domain.repository import CommentRepository
from murmur.domain.value import CommentId, CommentMode, VoteDirection

from .base import Service


class VoteService(Service):
    """Domain service for vote operations.

    Votes are keyed on the voter's IP address rather than their identity hash,
    so changing name or email does not buy a second vote. Who has voted is
    tracked per comment in a VoterFilter; a vote cannot be changed once cast.
    Deleted and pending comments take no votes.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize vote service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def vote(
        self,
        comment_id: CommentId,
        remote_ip: str,
        direction: VoteDirection,
    ) -> None:
        """Cast a vote on a comment.

        Args:
            comment_id: Comment ID
            remote_ip: Voter's IP address
            direction: Like or dislike

        Raises:
            NotFoundError: If the comment does not exist or is not visible
            AlreadyVotedError: If this address already voted on the comment
            SerializationError: If the stored voters blob is corrupt
        """
        with logfire.span(
            "vote_service.vote",
            comment_id=comment_id,
            direction=direction.value,
        ):
            comment = await self.comment_repository.find_for_vote(comment_id)
            if comment is None or comment.mode != CommentMode.VISIBLE:
                logfire.warn("Vote on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            if comment.voters is None:
                voters = VoterFilter.for_capacity(
                    DEFAULT_EXPECTED_VOTERS, DEFAULT_FP_RATE
                )
                voters.add(remote_ip)
            else:
                voters = VoterFilter.from_bytes(comment.voters)
                if voters.check_and_add(remote_ip):
                    logfire.info("Duplicate vote rejected", comment_id=comment_id)
                    raise AlreadyVotedError(comment_id)

            await self.comment_repository.record_vote(
                comment_id, voters.to_bytes(), direction
            )
            logfire.info(
                "Vote recorded", comment_id=comment_id, direction=direction.value
            )
