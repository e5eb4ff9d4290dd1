"""Reply nesting policy."""

import logfire

from murmur.domain.error import NotFoundError
from murmur.domain.repository import CommentRepository
from murmur.domain.value import CommentId

from .base import Service


class NestingPolicy(Service):
    """Keeps reply chains from growing deeper than the configured limit.

    A reply to a comment that already sits deeper than the limit is attached
    to that comment's parent instead, so threads flatten out at the limit.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize nesting policy.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def resolve_parent(
        self,
        requested_parent: CommentId | None,
        nesting_limit: int,
    ) -> CommentId | None:
        """Work out which comment a new reply should attach to.

        Args:
            requested_parent: Comment the reader replied to, None for a new root
            nesting_limit: Deepest depth a parent may have

        Returns:
            The effective parent, None for a root comment

        Raises:
            NotFoundError: If the requested parent does not exist
        """
        if requested_parent is None:
            return None

        with logfire.span(
            "nesting_policy.resolve_parent",
            requested_parent=requested_parent,
            nesting_limit=nesting_limit,
        ):
            depth = await self.comment_repository.ancestor_depth(requested_parent)
            if depth is None:
                raise NotFoundError("Comment", str(requested_parent))
            if depth <= nesting_limit:
                return requested_parent

            parent = await self.comment_repository.find_by_id(requested_parent)
            effective = parent.parent if parent else None
            logfire.info(
                "Reply flattened at nesting limit",
                requested_parent=requested_parent,
                effective_parent=effective,
                depth=depth,
            )
            return effective
