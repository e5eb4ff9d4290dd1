"""Mock persistence providers for testing."""

from dishka import Scope, provide

from murmur.domain.model import Comment
from murmur.domain.repository import CommentRepository, ThreadRepository
from murmur.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
)
from murmur.util.di.infrastructure.persistence import PersistenceProvider


class SeedableCommentRepository(InMemoryCommentRepository):
    """In-memory comment repository that tests can seed directly."""

    def put(self, comment: Comment) -> None:
        """Store a comment as-is, bypassing id assignment.

        Lets tests set up states the service never produces, such as pending
        comments or replies to missing parents.
        """
        self._comments[comment.id] = comment
        self._next_id = max(self._next_id, comment.id + 1)


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data survives across requests made
    against one container; every test builds its own container, so tests
    stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_inmemory_thread_repository(self) -> InMemoryThreadRepository:
        """Provide shared in-memory thread store."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.APP)
    def get_inmemory_comment_repository(
        self, threads: InMemoryThreadRepository
    ) -> InMemoryCommentRepository:
        """Provide shared in-memory comment store, seedable through put."""
        return SeedableCommentRepository(threads)

    @provide(scope=Scope.APP)
    def get_thread_repository(
        self, repository: InMemoryThreadRepository
    ) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return repository

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, repository: InMemoryCommentRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return repository
