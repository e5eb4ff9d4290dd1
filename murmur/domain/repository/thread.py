"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from murmur.domain.model.thread import Thread


class ThreadRepository(ABC):
    """Repository for Thread entity."""

    @abstractmethod
    async def find_by_uri(self, uri: str) -> Optional[Thread]:
        """Find a thread by its path.

        Args:
            uri: Path of the page on the blog

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, uri: str, title: Optional[str]) -> Thread:
        """Create a thread.

        Args:
            uri: Path of the page on the blog
            title: Page title

        Returns:
            The created thread with its database-assigned id
        """
        pass
