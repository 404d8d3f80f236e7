"""Application layer DI providers."""

from dishka import Scope, provide

from alumni.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from alumni.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from alumni.application.usecase.reply import (
    CreateReplyUseCase,
    DeleteReplyUseCase,
    UpdateReplyUseCase,
)
from alumni.config import DiscussionSettings
from alumni.domain.service import (
    CommentService,
    LikeService,
    ReplyService,
    ThreadService,
)
from alumni.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        settings: DiscussionSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, reply_service: ReplyService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(reply_service=reply_service)

    @provide(scope=Scope.REQUEST)
    def get_update_reply_use_case(
        self, reply_service: ReplyService
    ) -> UpdateReplyUseCase:
        """Provide update reply use case."""
        return UpdateReplyUseCase(reply_service=reply_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, reply_service: ReplyService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(reply_service=reply_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_get_like_status_use_case(
        self, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide like status use case."""
        return GetLikeStatusUseCase(like_service=like_service)
