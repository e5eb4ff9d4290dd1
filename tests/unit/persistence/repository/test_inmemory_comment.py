"""Unit tests for InMemoryCommentRepository."""

from datetime import datetime, timezone

import pytest

from murmur.domain.model import NewComment
from murmur.domain.value import CommentId, ThreadId
from murmur.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
)
from tests.conftest import make_comment
from tests.di.persistence import SeedableCommentRepository


class TestInMemoryCommentRepository:
    """Tests for the in-memory comment store."""

    def test_production_store_has_no_seeding_hook(self):
        repo = InMemoryCommentRepository(InMemoryThreadRepository())

        assert not hasattr(repo, "put")

    @pytest.mark.asyncio
    async def test_inserts_continue_after_seeded_ids(self):
        """Seeding a high id keeps later inserts from colliding with it."""
        # Arrange
        repo = SeedableCommentRepository(InMemoryThreadRepository())
        repo.put(make_comment(5))

        # Act
        stored = await repo.insert(
            NewComment(
                thread_id=ThreadId(1),
                created=datetime.now(timezone.utc),
                text="new",
            )
        )

        # Assert
        assert stored.id == 6
        assert (await repo.find_by_id(CommentId(5))).text == "comment"
