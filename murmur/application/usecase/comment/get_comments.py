"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from murmur.domain.service import CommentNode, ThreadAssembler


class CommentNodeResponse(BaseModel):
    """Comment in the nested response, with its replies."""

    id: int
    text: str
    author: str | None
    hash: str
    created: datetime
    votes: int
    replies: list["CommentNodeResponse"] = []

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert a domain node without its replies."""
        return cls(
            id=node.id,
            text=node.text,
            author=node.author,
            hash=node.identity_hash,
            created=node.created,
            votes=node.votes,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    thread_uri: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentNodeResponse]


class GetCommentsUseCase:
    """Use case for loading the reply tree of a page.

    Tombstoned comments appear with empty text and no author so their
    replies keep their place in the tree.
    """

    def __init__(self, thread_assembler: ThreadAssembler) -> None:
        """Initialize get comments use case.

        Args:
            thread_assembler: Builds the nested tree of a thread
        """
        self.thread_assembler = thread_assembler

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Root comments with nested replies; empty for unknown pages
        """
        roots = await self.thread_assembler.list(request.thread_uri)

        responses = [CommentNodeResponse.from_domain(root) for root in roots]
        stack = list(zip(roots, responses))
        while stack:
            node, response = stack.pop()
            for child in node.children:
                child_response = CommentNodeResponse.from_domain(child)
                response.replies.append(child_response)
                stack.append((child, child_response))

        return GetCommentsResponse(comments=responses)
