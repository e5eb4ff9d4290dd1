"""In-memory thread repository for testing."""

from typing import Optional

from murmur.domain.model.thread import Thread
from murmur.domain.repository.thread import ThreadRepository
from murmur.domain.value import ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}
        self._next_id = 1

    async def find_by_uri(self, uri: str) -> Optional[Thread]:
        """Find a thread by its path."""
        for thread in self._threads.values():
            if thread.uri == uri:
                return thread
        return None

    async def create(self, uri: str, title: Optional[str]) -> Thread:
        """Create a thread, returning the existing one for a known path."""
        existing = await self.find_by_uri(uri)
        if existing:
            return existing

        thread = Thread(id=ThreadId(self._next_id), uri=uri, title=title)
        self._threads[thread.id] = thread
        self._next_id += 1
        return thread

    def thread_ids_for_uri(self, uri: str) -> set[ThreadId]:
        """IDs of threads stored under a path (zero or one)."""
        return {t.id for t in self._threads.values() if t.uri == uri}
