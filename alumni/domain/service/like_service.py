"""Like domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from alumni.domain.model import Like
from alumni.domain.repository import LikeRepository
from alumni.domain.value import LikeableType, LikeAction, TargetId, UserId

from .base import Service
from .counter_service import CounterService


@dataclass
class LikeToggle:
    """Outcome of flipping a user's like on an entity."""

    action: LikeAction
    liked: bool


@dataclass
class LikeStatus:
    """A user's like state on an entity together with its total likes."""

    liked: bool
    like_count: int


class LikeService(Service):
    """Domain service for like operations.

    Likes are toggled rather than set: callers request a flip and learn the
    resulting state.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            counter_service: Counter recomputation
        """
        self.like_repository = like_repository
        self.counter_service = counter_service

    async def toggle_like(
        self, kind: LikeableType, likeable_id: TargetId, user_id: UserId
    ) -> LikeToggle:
        """Like an entity, or remove the like if the user already likes it.

        Args:
            kind: Likeable type
            likeable_id: ID of the liked entity
            user_id: User ID

        Returns:
            The action taken and the resulting like state
        """
        with logfire.span(
            "like_service.toggle_like",
            kind=kind.value,
            likeable_id=likeable_id,
            user_id=user_id,
        ):
            existing = await self.like_repository.find_by_user_and_likeable(
                user_id, kind, likeable_id
            )

            if existing is not None and existing.id is not None:
                await self.like_repository.delete(existing.id)
                result = LikeToggle(action=LikeAction.UNLIKED, liked=False)
            else:
                like = Like(
                    user_id=user_id,
                    likeable_type=kind,
                    likeable_id=likeable_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.like_repository.save(like)
                except IntegrityError:
                    # A concurrent request inserted the same like first
                    logfire.warn(
                        "Duplicate like attempt",
                        kind=kind.value,
                        likeable_id=likeable_id,
                        user_id=user_id,
                    )
                result = LikeToggle(action=LikeAction.LIKED, liked=True)

            await self.counter_service.recompute_like_count(kind, likeable_id)

            logfire.info(
                "Like toggled",
                kind=kind.value,
                likeable_id=likeable_id,
                user_id=user_id,
                action=result.action.value,
            )
            return result

    async def get_like_status(
        self,
        kind: LikeableType,
        likeable_id: TargetId,
        user_id: Optional[UserId] = None,
    ) -> LikeStatus:
        """Get the like count of an entity and whether ``user_id`` likes it.

        Anonymous callers always see ``liked=False``.
        """
        with logfire.span(
            "like_service.get_like_status",
            kind=kind.value,
            likeable_id=likeable_id,
            user_id=user_id,
        ):
            count = await self.like_repository.count_by_likeable(kind, likeable_id)
            liked = False
            if user_id is not None:
                like = await self.like_repository.find_by_user_and_likeable(
                    user_id, kind, likeable_id
                )
                liked = like is not None
            return LikeStatus(liked=liked, like_count=count)

    async def get_liked_ids(
        self,
        user_id: Optional[UserId],
        kind: LikeableType,
        likeable_ids: Sequence[TargetId],
    ) -> set[TargetId]:
        """Which of ``likeable_ids`` the user likes.

        Args:
            user_id: User ID, or None for anonymous callers
            kind: Likeable type shared by all the IDs
            likeable_ids: IDs to check

        Returns:
            The subset of IDs the user likes
        """
        if user_id is None or not likeable_ids:
            return set()

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.like_repository.find_by_user_and_likeables(
            user_id=user_id,
            likeable_type=kind,
            likeable_ids=likeable_ids,
        )
        return {like.likeable_id for like in likes}
