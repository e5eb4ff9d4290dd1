"""Email notification adapter."""

from .smtp import MockNotifier, SmtpNotifier

__all__ = ["MockNotifier", "SmtpNotifier"]
