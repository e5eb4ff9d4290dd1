"""Application layer DI providers."""

from dishka import Scope, provide

from murmur.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from murmur.application.usecase.session import InitialiseUseCase
from murmur.application.usecase.vote import VoteCommentUseCase
from murmur.config import Settings
from murmur.domain.service import (
    CommentService,
    Notifier,
    ThreadAssembler,
    ThreadService,
    VoteService,
)
from murmur.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        notifier: Notifier,
        settings: Settings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            notifier=notifier,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, thread_assembler: ThreadAssembler
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(thread_assembler=thread_assembler)

    @provide(scope=Scope.REQUEST)
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, settings: Settings
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, settings: Settings
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service, settings=settings)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(self, vote_service: VoteService) -> VoteCommentUseCase:
        """Provide vote use case."""
        return VoteCommentUseCase(vote_service=vote_service)

    # Session use cases
    @provide(scope=Scope.REQUEST)
    def get_initialise_use_case(self, settings: Settings) -> InitialiseUseCase:
        """Provide widget initialisation use case."""
        return InitialiseUseCase(settings=settings)
