"""In-memory rating repository for testing."""

from datetime import datetime
from typing import Optional

from askabout.domain.model.rating import Rating
from askabout.domain.repository.rating import RatingRepository
from askabout.domain.value import TopicId, UserId


class InMemoryRatingRepository(RatingRepository):
    """In-memory implementation of RatingRepository for testing."""

    def __init__(self) -> None:
        self._ratings: dict[tuple[UserId, TopicId], Rating] = {}

    async def find_by_user_and_topic(
        self, user_id: UserId, topic_id: TopicId
    ) -> Optional[Rating]:
        """Find the rating of a user in a topic."""
        return self._ratings.get((user_id, topic_id))

    async def find_by_user(self, user_id: UserId) -> list[Rating]:
        """Find all ratings of a user, highest amount first."""
        ratings = [r for r in self._ratings.values() if r.user_id == user_id]
        return sorted(ratings, key=lambda r: (-r.amount, r.created_at))

    async def create_if_absent(self, rating: Rating) -> Rating:
        """Insert a rating unless one exists for its user and topic."""
        return self._ratings.setdefault((rating.user_id, rating.topic_id), rating)

    async def add_to_amount(
        self, user_id: UserId, topic_id: TopicId, delta: int
    ) -> Optional[int]:
        """Add delta to the amount."""
        rating = self._ratings.get((user_id, topic_id))
        if rating is None:
            return None
        updated = rating.model_copy(
            update={"amount": rating.amount + delta, "updated_at": datetime.now()}
        )
        self._ratings[(user_id, topic_id)] = updated
        return updated.amount

    def count(self) -> int:
        """Total number of stored ratings."""
        return len(self._ratings)
