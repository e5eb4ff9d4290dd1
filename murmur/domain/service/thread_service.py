"""Thread domain services.

ThreadService maps blog pages to thread ids. ThreadAssembler turns the flat
comment rows of a thread into the nested reply tree shown on the page.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone

import logfire

from murmur.domain.error import PathCheckFailedError
from murmur.domain.model import Comment
from murmur.domain.repository import CommentRepository, ThreadRepository
from murmur.domain.value import CommentId, CommentMode, ThreadId

from .base import Service
from .identity import display_author

# Pending comments are hidden until moderated
DISPLAYED_MODES = (CommentMode.VISIBLE, CommentMode.TOMBSTONED)


class SiteClient:
    """Checks whether a page exists on the blog."""

    async def path_exists(self, url: str) -> bool:
        """Check that a URL is served by the blog.

        Args:
            url: Absolute URL of the page

        Returns:
            True if the page answered successfully
        """
        raise NotImplementedError


@dataclass
class CommentNode:
    """Node in a thread's reply tree."""

    id: CommentId
    text: str
    author: str | None
    identity_hash: str
    created: datetime
    votes: int
    children: list["CommentNode"] = field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        created = comment.created
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return cls(
            id=comment.id,
            text=comment.text,
            author=display_author(comment.author, comment.email, comment.website),
            identity_hash=comment.identity_hash,
            created=created,
            votes=comment.votes,
        )


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        site_client: SiteClient,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            site_client: Client used to verify new thread paths
        """
        self.thread_repository = thread_repository
        self.site_client = site_client

    async def resolve_or_create_thread(
        self, host: str, title: str | None, path: str
    ) -> ThreadId:
        """Get the thread for a page, creating it on first comment.

        A new thread is only created if the page really exists on the blog,
        so arbitrary paths cannot be stuffed into the database.

        Args:
            host: Base URL of the blog
            title: Page title
            path: Path of the page on the blog

        Returns:
            Thread ID

        Raises:
            PathCheckFailedError: If the page does not exist on the blog
        """
        with logfire.span("thread_service.resolve_or_create_thread", path=path):
            thread = await self.thread_repository.find_by_uri(path)
            if thread:
                return thread.id

            url = f"{host.rstrip('/')}/{path.lstrip('/')}"
            if not await self.site_client.path_exists(url):
                logfire.warn("Thread path check failed", url=url)
                raise PathCheckFailedError(url)

            thread = await self.thread_repository.create(path, title)
            logfire.info("Thread created", thread_id=thread.id, path=path)
            return thread.id


class ThreadAssembler(Service):
    """Builds the reply tree of a thread."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread assembler.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def list(self, thread_uri: str) -> list[CommentNode]:
        """Get the nested comments of a thread.

        Algorithm:
        1. Fetch visible and tombstoned comments of the thread
        2. Build adjacency map of parent_id -> [child_ids]
        3. Collect comments without a parent as roots
        4. Attach children depth-first with an explicit stack, so that very
           deep reply chains cannot exhaust the interpreter stack

        Roots and children are ordered by ascending id. A comment whose parent
        is not displayed is unreachable from any root and is left out.

        Args:
            thread_uri: Path of the thread

        Returns:
            Root nodes with their children populated
        """
        with logfire.span("thread_assembler.list", thread_uri=thread_uri):
            comments = await self.comment_repository.find_by_thread_uri(
                thread_uri, DISPLAYED_MODES
            )
            comments = sorted(comments, key=lambda c: c.id)

            nodes: dict[CommentId, CommentNode] = {}
            adjacency: dict[CommentId, list[CommentId]] = defaultdict(list)
            root_ids: list[CommentId] = []
            for comment in comments:
                nodes[comment.id] = CommentNode.from_comment(comment)
                if comment.parent is None:
                    root_ids.append(comment.id)
                else:
                    adjacency[comment.parent].append(comment.id)

            roots = [nodes[root_id] for root_id in root_ids]
            stack = list(roots)
            visited: set[CommentId] = set()
            while stack:
                node = stack.pop()
                if node.id in visited:
                    continue
                visited.add(node.id)
                for child_id in adjacency.get(node.id, []):
                    child = nodes[child_id]
                    node.children.append(child)
                    stack.append(child)

            hidden = len(comments) - len(visited)
            if hidden:
                logfire.warn(
                    "Comments unreachable from any root",
                    thread_uri=thread_uri,
                    count=hidden,
                )
            logfire.info(
                "Built comment tree",
                thread_uri=thread_uri,
                root_count=len(roots),
                comment_count=len(visited),
            )
            return roots
