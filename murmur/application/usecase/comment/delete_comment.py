"""Delete comment use case."""

from pydantic import BaseModel

from murmur.config import Settings
from murmur.domain.service import CommentService
from murmur.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    identity_hash: str


class DeleteCommentUseCase:
    """Use case for a commenter deleting their own comment."""

    def __init__(self, comment_service: CommentService, settings: Settings) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            settings: Application settings
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        A comment with replies is tombstoned rather than removed.

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
        await self.comment_service.delete(comment_id)
