"""Domain layer DI providers."""

from dishka import Scope, provide

from alumni.config import AuthSettings, DiscussionSettings
from alumni.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    TargetRepository,
    TransactionManager,
)
from alumni.domain.service import (
    CommentService,
    CounterService,
    JWTService,
    LikeService,
    ReplyService,
    TargetService,
    ThreadService,
)
from alumni.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_target_service(self, target_repository: TargetRepository) -> TargetService:
        """Provide target lookup domain service."""
        return TargetService(target_repository=target_repository)

    @provide
    def get_counter_service(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
        target_repository: TargetRepository,
        transaction_manager: TransactionManager,
    ) -> CounterService:
        """Provide counter maintenance domain service."""
        return CounterService(
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            like_repository=like_repository,
            target_repository=target_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        target_service: TargetService,
        counter_service: CounterService,
        settings: DiscussionSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            target_service=target_service,
            counter_service=counter_service,
            settings=settings,
        )

    @provide
    def get_reply_service(
        self,
        reply_repository: ReplyRepository,
        comment_service: CommentService,
        counter_service: CounterService,
        settings: DiscussionSettings,
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            reply_repository=reply_repository,
            comment_service=comment_service,
            counter_service=counter_service,
            settings=settings,
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, counter_service: CounterService
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, counter_service=counter_service
        )

    @provide
    def get_thread_service(
        self, reply_repository: ReplyRepository, like_service: LikeService
    ) -> ThreadService:
        """Provide thread assembly domain service."""
        return ThreadService(
            reply_repository=reply_repository, like_service=like_service
        )
