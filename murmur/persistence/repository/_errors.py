"""Translation of driver failures into domain storage errors."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from murmur.domain.error import StorageError


@contextmanager
def storage_errors(operation: str, error_cls: type[StorageError]) -> Iterator[None]:
    """Re-raise SQLAlchemy errors raised in the block as ``error_cls``.

    Args:
        operation: Name of the repository operation, for the error message
        error_cls: StorageReadError or StorageWriteError
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Storage operation failed", operation=operation, error=str(e))
        raise error_cls(operation) from e
