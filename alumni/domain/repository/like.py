"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from alumni.domain.model.like import Like
from alumni.domain.value import LikeableType, LikeId, TargetId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: TargetId,
    ) -> Optional[Like]:
        """Find a user's like on a specific item.

        Args:
            user_id: The user's ID
            likeable_type: Type of item
            likeable_id: ID of the item

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_likeables(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_ids: Sequence[TargetId],
    ) -> List[Like]:
        """Find a user's likes on multiple items (batch query).

        Args:
            user_id: The user's ID
            likeable_type: Type of items
            likeable_ids: IDs of the items to check

        Returns:
            List of likes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a new like.

        Args:
            like: The like to save

        Returns:
            The saved like with its assigned ID

        Raises:
            IntegrityError: If the user already likes this item
        """
        pass

    @abstractmethod
    async def delete(self, like_id: LikeId) -> None:
        """Physically delete a like.

        Args:
            like_id: The like ID to delete
        """
        pass

    @abstractmethod
    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: TargetId,
    ) -> int:
        """Count likes on a specific item."""
        pass
