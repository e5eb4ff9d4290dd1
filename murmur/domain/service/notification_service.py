"""Notification interface for new comments."""

from murmur.config import NotificationSettings
from murmur.domain.value import CommentSubmission


class Notifier:
    """Sends the blog owner a message about a new comment."""

    async def notify(
        self,
        submission: CommentSubmission,
        settings: NotificationSettings,
        host: str,
        blog_name: str,
        remote_ip: str | None,
    ) -> None:
        """Send a new comment notification.

        Args:
            submission: The comment that was posted
            settings: Notification settings (recipient, server)
            host: Base URL of the blog
            blog_name: Name of the blog
            remote_ip: Address the comment came from

        Raises:
            NotificationError: If the message could not be sent
        """
        raise NotImplementedError
