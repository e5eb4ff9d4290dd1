"""Integration tests for PostgresCommentRepository.

These tests run the repository SQL against a real PostgreSQL database
(assumes postgres running at the configured database URL).
"""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from murmur.domain.error import AlreadyVotedError
from murmur.domain.model import NewComment
from murmur.domain.repository import CommentRepository, ThreadRepository
from murmur.domain.service import VoteService
from murmur.domain.value import CommentId, CommentMode, ThreadId, VoteDirection
from murmur.persistence.repository import (
    PostgresCommentRepository,
    PostgresThreadRepository,
)
from murmur.persistence.tables import metadata
from tests.harness import create_env_fixture

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def schema(integration_env):
    """Make sure the tables exist before each test."""
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


def _new_comment(
    thread_id: ThreadId,
    parent: CommentId | None = None,
    text: str = "comment",
) -> NewComment:
    return NewComment(
        thread_id=thread_id,
        parent=parent,
        created=datetime.now(timezone.utc),
        text=text,
        identity_hash="abc",
    )


def _unique_uri() -> str:
    return f"/post-{uuid4().hex}/"


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_insert_returns_stored_row(self, integration_env):
        # Arrange
        threads = await integration_env.get(ThreadRepository)
        comments = await integration_env.get(CommentRepository)
        thread = await threads.create(_unique_uri(), "Post")

        # Act
        stored = await comments.insert(_new_comment(thread.id, text="hello"))

        # Assert
        assert stored.id > 0
        assert stored.mode == CommentMode.VISIBLE
        assert stored.created.tzinfo is not None
        assert (await comments.find_by_id(stored.id)).text == "hello"

    @pytest.mark.asyncio
    async def test_ancestor_depth_counts_the_comment_itself(self, integration_env):
        """The recursive walk gives a root depth of 1, like the in-memory walk."""
        # Arrange
        threads = await integration_env.get(ThreadRepository)
        comments = await integration_env.get(CommentRepository)
        thread = await threads.create(_unique_uri(), None)
        root = await comments.insert(_new_comment(thread.id))
        child = await comments.insert(_new_comment(thread.id, parent=root.id))
        grandchild = await comments.insert(_new_comment(thread.id, parent=child.id))

        # Act / Assert
        assert await comments.ancestor_depth(root.id) == 1
        assert await comments.ancestor_depth(child.id) == 2
        assert await comments.ancestor_depth(grandchild.id) == 3
        assert await comments.ancestor_depth(CommentId(-1)) is None

    @pytest.mark.asyncio
    async def test_sweep_removes_only_childless_tombstones(self, integration_env):
        # Arrange
        threads = await integration_env.get(ThreadRepository)
        comments = await integration_env.get(CommentRepository)
        thread = await threads.create(_unique_uri(), None)
        kept = await comments.insert(_new_comment(thread.id))
        await comments.insert(_new_comment(thread.id, parent=kept.id))
        lonely = await comments.insert(_new_comment(thread.id))
        await comments.tombstone(kept.id)
        await comments.tombstone(lonely.id)

        # Act
        removed = await comments.delete_childless_tombstones()

        # Assert
        assert removed >= 1
        assert await comments.find_by_id(lonely.id) is None
        tombstone = await comments.find_by_id(kept.id)
        assert tombstone.is_tombstoned
        assert tombstone.text == ""
        assert tombstone.identity_hash == ""

    @pytest.mark.asyncio
    async def test_count_skips_pending(self, integration_env):
        # Arrange
        threads = await integration_env.get(ThreadRepository)
        comments = await integration_env.get(CommentRepository)
        uri = _unique_uri()
        thread = await threads.create(uri, None)
        await comments.insert(_new_comment(thread.id))
        pending = _new_comment(thread.id).model_copy(
            update={"mode": CommentMode.PENDING}
        )
        await comments.insert(pending)

        # Act
        count = await comments.count_by_thread_uri(
            uri, (CommentMode.VISIBLE, CommentMode.TOMBSTONED)
        )

        # Assert
        assert count == 1


class TestVoteIntegration:
    """Vote bookkeeping against the real row lock and UPDATE."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_increments_once(self, integration_env):
        # Arrange
        threads = await integration_env.get(ThreadRepository)
        comments = await integration_env.get(CommentRepository)
        vote_service = await integration_env.get(VoteService)
        thread = await threads.create(_unique_uri(), None)
        comment = await comments.insert(_new_comment(thread.id))

        # Act
        await vote_service.vote(comment.id, "10.0.0.1", VoteDirection.UP)
        with pytest.raises(AlreadyVotedError):
            await vote_service.vote(comment.id, "10.0.0.1", VoteDirection.UP)
        await vote_service.vote(comment.id, "10.0.0.2", VoteDirection.DOWN)

        # Assert
        stored = await comments.find_by_id(comment.id)
        assert stored.likes == 1
        assert stored.dislikes == 1
        assert stored.voters is not None

    @pytest.mark.asyncio
    async def test_concurrent_votes_from_one_address_serialize(self, integration_env):
        """The second transaction waits for the first and then sees its vote."""
        # Arrange
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        async with session_factory() as setup:
            thread = await PostgresThreadRepository(setup).create(_unique_uri(), None)
            comment = await PostgresCommentRepository(setup).insert(
                _new_comment(thread.id)
            )
            await setup.commit()

        async with session_factory() as first, session_factory() as second:
            first_votes = VoteService(PostgresCommentRepository(first))
            second_votes = VoteService(PostgresCommentRepository(second))

            # Act
            await first_votes.vote(comment.id, "10.0.0.9", VoteDirection.UP)
            racing = asyncio.create_task(
                second_votes.vote(comment.id, "10.0.0.9", VoteDirection.UP)
            )
            await asyncio.sleep(0.2)
            await first.commit()

            # Assert
            with pytest.raises(AlreadyVotedError):
                await racing
            await second.rollback()

        async with session_factory() as check:
            stored = await PostgresCommentRepository(check).find_by_id(comment.id)
        assert stored.likes == 1
