"""SMTP notifier for new comments."""

import asyncio
import smtplib
from email.mime.text import MIMEText

import logfire

from murmur.adapter.error import NotificationError
from murmur.config import NotificationSettings
from murmur.domain.service.notification_service import Notifier
from murmur.domain.value import CommentSubmission

_BODY_TEMPLATE = """A new comment was posted on {blog_name} ({host}).

Author:  {author}
Email:   {email}
Website: {website}
IP:      {remote_ip}
Reply to comment: {parent}

{text}
"""


def build_message(
    submission: CommentSubmission,
    settings: NotificationSettings,
    host: str,
    blog_name: str,
    remote_ip: str | None,
) -> MIMEText:
    """Build the notification email for a new comment."""
    body = _BODY_TEMPLATE.format(
        blog_name=blog_name,
        host=host,
        author=submission.author or "anonymous",
        email=submission.email or "-",
        website=submission.website or "-",
        remote_ip=remote_ip or "unknown",
        parent=submission.parent if submission.parent is not None else "-",
        text=submission.text,
    )
    msg = MIMEText(body, "plain", "utf-8")
    msg["Subject"] = f"New comment on {blog_name}"
    msg["From"] = settings.from_address
    msg["To"] = settings.to_address or ""
    return msg


class SmtpNotifier(Notifier):
    """Notifier sending plain-text email over SMTP.

    The blocking SMTP exchange runs in the default executor so it does not
    stall the event loop.
    """

    async def notify(
        self,
        submission: CommentSubmission,
        settings: NotificationSettings,
        host: str,
        blog_name: str,
        remote_ip: str | None,
    ) -> None:
        """Email the blog owner about a new comment.

        Raises:
            NotificationError: If no recipient is configured or sending fails
        """
        if not settings.to_address:
            raise NotificationError("No notification recipient configured")

        msg = build_message(submission, settings, host, blog_name, remote_ip)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._send_sync, settings, msg)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"SMTP send failed: {e}") from e

        logfire.info(
            "New comment notification sent",
            to=settings.to_address,
            smtp_server=settings.smtp_server,
        )

    @staticmethod
    def _send_sync(settings: NotificationSettings, msg: MIMEText) -> None:
        """Synchronous SMTP send, executed in a thread pool."""
        with smtplib.SMTP(settings.smtp_server, settings.smtp_port, timeout=30) as server:
            server.ehlo()
            if settings.smtp_port != 25:
                server.starttls()
                server.ehlo()
            if settings.smtp_user and settings.smtp_password:
                server.login(settings.smtp_user, settings.smtp_password)
            server.sendmail(settings.from_address, [settings.to_address], msg.as_string())


class MockNotifier(Notifier):
    """Notifier for testing.

    Records every notification instead of sending it. Set ``fail`` to make
    every call raise.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[MIMEText] = []

    async def notify(
        self,
        submission: CommentSubmission,
        settings: NotificationSettings,
        host: str,
        blog_name: str,
        remote_ip: str | None,
    ) -> None:
        """Record the notification."""
        if self.fail:
            raise NotificationError("Mock notifier configured to fail")
        self.sent.append(build_message(submission, settings, host, blog_name, remote_ip))
