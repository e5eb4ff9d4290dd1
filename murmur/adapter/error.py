"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NotificationError(AdapterError):
    """Sending a notification failed."""

    pass
