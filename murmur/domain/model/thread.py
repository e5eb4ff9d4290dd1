"""Thread entity.

A thread is one commentable page of the blog, keyed by its path.
"""

from murmur.domain.model.common import DomainModel
from murmur.domain.value import ThreadId


class Thread(DomainModel):
    """Thread entity."""

    id: ThreadId
    uri: str
    title: str | None = None
