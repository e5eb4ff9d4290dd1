"""Unit tests for ThreadService and ThreadAssembler."""

import pytest

from murmur.adapter.site import MockSiteClient
from murmur.domain.error import AlreadyVotedError, PathCheckFailedError
from murmur.domain.service import (
    CommentService,
    ThreadAssembler,
    ThreadService,
    VoteService,
)
from murmur.domain.value import CommentId, CommentMode, CommentSubmission, VoteDirection
from murmur.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestResolveOrCreateThread:
    """Tests for resolve_or_create_thread."""

    @pytest.mark.asyncio
    async def test_creates_thread_for_existing_page(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        site = await unit_env.get(MockSiteClient)
        threads = await unit_env.get(InMemoryThreadRepository)

        # Act
        thread_id = await thread_service.resolve_or_create_thread(
            "https://blog.example.com/", "Hello", "/2026/hello/"
        )

        # Assert
        assert site.checked == ["https://blog.example.com/2026/hello/"]
        thread = await threads.find_by_uri("/2026/hello/")
        assert thread.id == thread_id
        assert thread.title == "Hello"

    @pytest.mark.asyncio
    async def test_known_thread_skips_page_check(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        site = await unit_env.get(MockSiteClient)
        threads = await unit_env.get(InMemoryThreadRepository)
        existing = await threads.create("/post/", None)

        # Act
        thread_id = await thread_service.resolve_or_create_thread(
            "https://blog.example.com", None, "/post/"
        )

        # Assert
        assert thread_id == existing.id
        assert site.checked == []

    @pytest.mark.asyncio
    async def test_missing_page_is_rejected(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        site = await unit_env.get(MockSiteClient)
        threads = await unit_env.get(InMemoryThreadRepository)
        site.missing.add("https://blog.example.com/nope/")

        # Act / Assert
        with pytest.raises(PathCheckFailedError):
            await thread_service.resolve_or_create_thread(
                "https://blog.example.com", None, "/nope/"
            )

        assert await threads.find_by_uri("/nope/") is None


class TestThreadAssembler:
    """Tests for building the reply tree."""

    @pytest.mark.asyncio
    async def test_conversation_with_votes(self, unit_env):
        """Two comments, a reply and a like, as seen by the reader."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        assembler = await unit_env.get(ThreadAssembler)
        threads = await unit_env.get(InMemoryThreadRepository)
        thread = await threads.create("/post/", None)

        a = await comment_service.insert(
            thread.id, CommentSubmission(text="hello", author="A"), "10.0.0.1", 2
        )
        await comment_service.insert(
            thread.id,
            CommentSubmission(text="hi back", author="B", parent=a.id),
            "10.0.0.2",
            2,
        )

        # Act
        await vote_service.vote(a.id, "10.0.0.3", VoteDirection.UP)
        with pytest.raises(AlreadyVotedError):
            await vote_service.vote(a.id, "10.0.0.3", VoteDirection.UP)
        roots = await assembler.list("/post/")

        # Assert
        assert len(roots) == 1
        root = roots[0]
        assert root.text == "hello"
        assert root.author == "A"
        assert root.votes == 1
        assert [child.text for child in root.children] == ["hi back"]
        assert root.children[0].author == "B"
        assert root.children[0].children == []

    @pytest.mark.asyncio
    async def test_roots_and_children_ordered_by_id(self, unit_env):
        # Arrange
        assembler = await unit_env.get(ThreadAssembler)
        threads = await unit_env.get(InMemoryThreadRepository)
        repo = await unit_env.get(InMemoryCommentRepository)
        thread = await threads.create("/post/", None)
        repo.put(make_comment(5, thread_id=thread.id))
        repo.put(make_comment(4, thread_id=thread.id, parent=2))
        repo.put(make_comment(2, thread_id=thread.id))
        repo.put(make_comment(3, thread_id=thread.id, parent=2))

        # Act
        roots = await assembler.list("/post/")

        # Assert
        assert [r.id for r in roots] == [2, 5]
        assert [c.id for c in roots[0].children] == [3, 4]

    @pytest.mark.asyncio
    async def test_tombstones_keep_their_replies(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        assembler = await unit_env.get(ThreadAssembler)
        threads = await unit_env.get(InMemoryThreadRepository)
        repo = await unit_env.get(InMemoryCommentRepository)
        thread = await threads.create("/post/", None)
        repo.put(make_comment(1, thread_id=thread.id, text="gone", author="A"))
        repo.put(make_comment(2, thread_id=thread.id, parent=1, text="reply"))
        await comment_service.delete(CommentId(1))

        # Act
        roots = await assembler.list("/post/")

        # Assert
        assert len(roots) == 1
        assert roots[0].text == ""
        assert roots[0].author is None
        assert roots[0].children[0].text == "reply"

    @pytest.mark.asyncio
    async def test_pending_comments_and_their_replies_are_hidden(self, unit_env):
        # Arrange
        assembler = await unit_env.get(ThreadAssembler)
        threads = await unit_env.get(InMemoryThreadRepository)
        repo = await unit_env.get(InMemoryCommentRepository)
        thread = await threads.create("/post/", None)
        repo.put(make_comment(1, thread_id=thread.id))
        repo.put(make_comment(2, thread_id=thread.id, mode=CommentMode.PENDING))
        repo.put(make_comment(3, thread_id=thread.id, parent=2))

        # Act
        roots = await assembler.list("/post/")

        # Assert
        assert [r.id for r in roots] == [1]
        assert roots[0].children == []

    @pytest.mark.asyncio
    async def test_unknown_thread_is_empty(self, unit_env):
        assembler = await unit_env.get(ThreadAssembler)

        assert await assembler.list("/nothing-here/") == []

    @pytest.mark.asyncio
    async def test_very_deep_chain(self, unit_env):
        """Chains deeper than the interpreter's recursion limit still build."""
        # Arrange
        assembler = await unit_env.get(ThreadAssembler)
        threads = await unit_env.get(InMemoryThreadRepository)
        repo = await unit_env.get(InMemoryCommentRepository)
        thread = await threads.create("/post/", None)
        depth = 3000
        repo.put(make_comment(1, thread_id=thread.id))
        for comment_id in range(2, depth + 1):
            repo.put(make_comment(comment_id, thread_id=thread.id, parent=comment_id - 1))

        # Act
        roots = await assembler.list("/post/")

        # Assert
        assert len(roots) == 1
        node, seen = roots[0], 1
        while node.children:
            assert len(node.children) == 1
            node = node.children[0]
            seen += 1
        assert seen == depth
