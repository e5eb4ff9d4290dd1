"""Create comment use case."""

import logfire
from pydantic import BaseModel

from murmur.config import Settings
from murmur.domain.service import CommentService, Notifier, ThreadService
from murmur.domain.value import CommentId, CommentSubmission

from ..base import BaseUseCase


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    path: str  # Path of the page being commented on
    title: str | None = None  # Page title, stored when the thread is created
    text: str
    author: str | None = None
    email: str | None = None
    website: str | None = None
    parent: int | None = None  # Comment being replied to
    remote_ip: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    id: int
    parent: int | None
    author: str | None


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment or a reply on a blog page."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        notifier: Notifier,
        settings: Settings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            notifier: Sends new comment notifications
            settings: Application settings
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.notifier = notifier
        self.settings = settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the page's thread, creating it if the page exists
        2. Store the comment, flattening replies beyond the nesting limit
        3. Notify the blog owner if enabled; a failed notification is logged
           and does not fail the request

        Args:
            request: Create comment request

        Returns:
            Id, effective parent and display name of the new comment

        Raises:
            PathCheckFailedError: If the page does not exist on the blog
            StorageError: If the comment could not be stored
        """
        submission = CommentSubmission(
            text=request.text,
            author=request.author,
            email=request.email,
            website=request.website,
            parent=CommentId(request.parent) if request.parent is not None else None,
        )

        thread_id = await self.thread_service.resolve_or_create_thread(
            self.settings.host, request.title, request.path
        )
        inserted = await self.comment_service.insert(
            thread_id,
            submission,
            request.remote_ip,
            self.settings.comments.nesting_limit,
        )

        if self.settings.notifications.new_comment:
            try:
                await self.notifier.notify(
                    submission,
                    self.settings.notifications,
                    self.settings.host,
                    self.settings.blog_name,
                    request.remote_ip,
                )
            except Exception as e:
                logfire.warn(
                    "New comment notification failed",
                    comment_id=inserted.id,
                    error=str(e),
                )

        return CreateCommentResponse(
            id=inserted.id,
            parent=inserted.parent,
            author=inserted.author,
        )
