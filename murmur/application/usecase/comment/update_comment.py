"""Update comment use case."""

from pydantic import BaseModel

from murmur.config import Settings
from murmur.domain.service import CommentService
from murmur.domain.value import CommentEdit, CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    identity_hash: str  # Hash the requester claims to own the comment with
    text: str
    author: str | None = None
    email: str | None = None
    website: str | None = None
    remote_ip: str | None = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    id: int
    author: str | None
    text: str
    hash: str


class UpdateCommentUseCase:
    """Use case for a commenter editing their own comment."""

    def __init__(self, comment_service: CommentService, settings: Settings) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            settings: Application settings
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Steps:
        1. Check the claimed hash and the edit window
        2. Replace text and profile; the identity hash is recomputed

        Args:
            request: Update comment request

        Returns:
            Refreshed display fields of the comment

        Raises:
            NotFoundError: If the comment does not exist
            UnauthorizedError: If the hash differs or the edit window closed
        """
        comment_id = CommentId(request.comment_id)
        await self.comment_service.authorize(
            comment_id,
            request.identity_hash,
            self.settings.comments.edit_timeout,
        )

        edits = await self.comment_service.update(
            comment_id,
            CommentEdit(
                text=request.text,
                author=request.author,
                email=request.email,
                website=request.website,
            ),
            request.remote_ip,
        )
        return UpdateCommentResponse(
            id=edits.id,
            author=edits.author,
            text=edits.text,
            hash=edits.identity_hash,
        )
