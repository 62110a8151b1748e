"""Rating repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askabout.domain.model.rating import Rating
from askabout.domain.value import TopicId, UserId


class RatingRepository(ABC):
    """Repository for Rating aggregate.

    Amount changes go through ``add_to_amount`` so the storage layer
    applies them atomically; callers never write a computed amount back.
    """

    @abstractmethod
    async def find_by_user_and_topic(
        self, user_id: UserId, topic_id: TopicId
    ) -> Optional[Rating]:
        """Find the rating of a user in a topic.

        Args:
            user_id: The rated user's ID
            topic_id: The topic ID

        Returns:
            The rating if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Rating]:
        """Find all ratings of a user, highest amount first."""
        pass

    @abstractmethod
    async def create_if_absent(self, rating: Rating) -> Rating:
        """Insert a rating unless one exists for its user and topic.

        Args:
            rating: The rating to insert

        Returns:
            The stored rating (the existing one if already present)
        """
        pass

    @abstractmethod
    async def add_to_amount(
        self, user_id: UserId, topic_id: TopicId, delta: int
    ) -> Optional[int]:
        """Atomically add delta to a rating's amount.

        Args:
            user_id: The rated user's ID
            topic_id: The topic ID
            delta: Signed change to apply

        Returns:
            The new amount, or None if no rating row exists
        """
        pass
