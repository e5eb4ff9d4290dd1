"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthorizedError(DomainError):
    """Raised when an edit or delete is attempted without a matching hash,
    or after the edit window has closed."""

    def __init__(self, reason: str, comment_id: int | None = None):
        self.reason = reason
        self.comment_id = comment_id
        target = f"comment {comment_id}" if comment_id is not None else "comment"
        super().__init__(f"Not authorized to modify {target}: {reason}")


class AlreadyVotedError(DomainError):
    """Raised when the same address votes twice on a comment."""

    def __init__(self, comment_id: int):
        self.comment_id = comment_id
        super().__init__(f"Already voted on comment {comment_id}")


class PathCheckFailedError(DomainError):
    """Raised when a thread path does not exist on the blog host."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Path is not served by the blog: {url}")


class SerializationError(DomainError):
    """Raised when the stored voters blob cannot be encoded or decoded."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        super().__init__(f"Serialization failed during {operation}: {detail}")


class InvariantViolationError(DomainError):
    """Raised when data the service relies on is unexpectedly missing."""

    pass


class StorageError(DomainError):
    """Base storage error.

    The underlying driver exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage operation failed: {operation}")


class StorageReadError(StorageError):
    """Reading from storage failed."""

    pass


class StorageWriteError(StorageError):
    """Inserting, updating or deleting in storage failed."""

    pass
