"""Domain layer DI providers."""

from dishka import Scope, provide

from murmur.domain.repository import CommentRepository, ThreadRepository
from murmur.domain.service import (
    CommentService,
    NestingPolicy,
    SiteClient,
    ThreadAssembler,
    ThreadService,
    VoteService,
)
from murmur.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_nesting_policy(
        self, comment_repository: CommentRepository
    ) -> NestingPolicy:
        """Provide reply nesting policy."""
        return NestingPolicy(comment_repository=comment_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        nesting_policy: NestingPolicy,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            nesting_policy=nesting_policy,
        )

    @provide
    def get_vote_service(self, comment_repository: CommentRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(comment_repository=comment_repository)

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        site_client: SiteClient,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            site_client=site_client,
        )

    @provide
    def get_thread_assembler(
        self, comment_repository: CommentRepository
    ) -> ThreadAssembler:
        """Provide comment tree assembler."""
        return ThreadAssembler(comment_repository=comment_repository)
