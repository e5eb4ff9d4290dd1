"""Interface layer errors.

Maps domain failures onto HTTP responses. Client errors are logged as
warnings; everything else is logged as an error and reported as a 500
without exposing the cause.
"""

import logfire
from fastapi import HTTPException, status

from murmur.domain.error import (
    AlreadyVotedError,
    DomainError,
    NotFoundError,
    PathCheckFailedError,
    UnauthorizedError,
)

_CLIENT_ERRORS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (UnauthorizedError, status.HTTP_403_FORBIDDEN),
    (PathCheckFailedError, status.HTTP_403_FORBIDDEN),
    (AlreadyVotedError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError, action: str) -> HTTPException:
    """Translate a domain error raised while handling a request.

    Args:
        error: The domain error
        action: Short description of what the request tried to do

    Returns:
        HTTPException to raise from the route
    """
    for error_cls, status_code in _CLIENT_ERRORS:
        if isinstance(error, error_cls):
            logfire.warn(
                f"{action} rejected",
                error_type=type(error).__name__,
                error=str(error),
            )
            return HTTPException(status_code=status_code, detail=str(error))

    logfire.error(
        f"{action} failed",
        error_type=type(error).__name__,
        error=str(error),
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action} failed",
    )
