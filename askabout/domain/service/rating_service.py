"""Rating domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from askabout.domain.error import NotFoundError
from askabout.domain.model import Rating
from askabout.domain.repository import RatingRepository
from askabout.domain.value import RatingId, TopicId, UserId

from .base import Service


class RatingService(Service):
    """Domain service for per-topic user ratings."""

    def __init__(self, rating_repository: RatingRepository) -> None:
        """Initialize rating service.

        Args:
            rating_repository: Rating repository
        """
        self.rating_repository = rating_repository

    async def ensure_rating(self, user_id: UserId, topic_id: TopicId) -> Rating:
        """Get the rating of a user in a topic, creating it at 0 if missing.

        Called by apply_delta before a vote moves the rating. Comment and
        question authoring, which live outside this service, call it when a
        user first posts in a topic.

        Args:
            user_id: Rated user ID
            topic_id: Topic ID

        Returns:
            The existing or newly created rating
        """
        with logfire.span(
            "rating_service.ensure_rating",
            user_id=str(user_id),
            topic_id=str(topic_id),
        ):
            now = datetime.now()
            rating = await self.rating_repository.create_if_absent(
                Rating(
                    id=RatingId(uuid4()),
                    user_id=user_id,
                    topic_id=topic_id,
                    amount=0,
                    created_at=now,
                    updated_at=now,
                )
            )
            return rating

    async def get_rating(self, user_id: UserId, topic_id: TopicId) -> Rating:
        """Get the rating of a user in a topic.

        Raises:
            NotFoundError: If the user has no rating in the topic
        """
        rating = await self.rating_repository.find_by_user_and_topic(user_id, topic_id)
        if not rating:
            logfire.warn(
                "Rating not found", user_id=str(user_id), topic_id=str(topic_id)
            )
            raise NotFoundError("Rating", f"{user_id}:{topic_id}")
        return rating

    async def get_user_ratings(self, user_id: UserId) -> list[Rating]:
        """Get all ratings of a user, highest first."""
        with logfire.span("rating_service.get_user_ratings", user_id=str(user_id)):
            return await self.rating_repository.find_by_user(user_id)

    async def apply_delta(
        self,
        user_id: UserId,
        topic_id: TopicId,
        delta: int,
        create_missing: bool = True,
    ) -> int:
        """Atomically change a rating's amount.

        Args:
            user_id: Rated user ID
            topic_id: Topic ID
            delta: Signed change to apply
            create_missing: Create the rating at 0 first if it does not exist

        Returns:
            The new amount

        Raises:
            NotFoundError: If the rating is missing and create_missing is False
        """
        with logfire.span(
            "rating_service.apply_delta",
            user_id=str(user_id),
            topic_id=str(topic_id),
            delta=delta,
        ):
            if create_missing:
                await self.ensure_rating(user_id, topic_id)

            amount = await self.rating_repository.add_to_amount(
                user_id, topic_id, delta
            )
            if amount is None:
                logfire.warn(
                    "Rating not found", user_id=str(user_id), topic_id=str(topic_id)
                )
                raise NotFoundError("Rating", f"{user_id}:{topic_id}")

            logfire.info(
                "Rating updated",
                user_id=str(user_id),
                topic_id=str(topic_id),
                delta=delta,
                amount=amount,
            )
            return amount
