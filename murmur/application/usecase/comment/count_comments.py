"""Count comments use case."""

from pydantic import BaseModel

from murmur.domain.service import CommentService


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    thread_uri: str


class CountCommentsResponse(BaseModel):
    """Count comments response."""

    count: int


class CountCommentsUseCase:
    """Use case for the comment counter shown in post listings."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        """Count visible and tombstoned comments on a page."""
        count = await self.comment_service.count(request.thread_uri)
        return CountCommentsResponse(count=count)
