"""Get user ratings use case."""

from uuid import UUID

from pydantic import BaseModel

from askabout.application.usecase.base import BaseUseCase
from askabout.domain.repository import TopicRepository
from askabout.domain.service import RatingService, UserService
from askabout.domain.value import UserId


class GetUserRatingsRequest(BaseModel):
    """Get user ratings request."""

    user_id: str


class TopicRating(BaseModel):
    """Rating of the user in one topic."""

    topic_id: str
    topic_name: str | None  # None if the topic no longer exists
    amount: int


class GetUserRatingsResponse(BaseModel):
    """Per-topic ratings of a user, highest first."""

    user_id: str
    handle: str
    total: int
    ratings: list[TopicRating]


class GetUserRatingsUseCase(
    BaseUseCase[GetUserRatingsRequest, GetUserRatingsResponse]
):
    """Use case for reading a user's reputation across topics."""

    def __init__(
        self,
        user_service: UserService,
        rating_service: RatingService,
        topic_repository: TopicRepository,
    ) -> None:
        """Initialize get user ratings use case.

        Args:
            user_service: User domain service
            rating_service: Rating domain service
            topic_repository: Topic repository for topic names
        """
        self.user_service = user_service
        self.rating_service = rating_service
        self.topic_repository = topic_repository

    async def execute(self, request: GetUserRatingsRequest) -> GetUserRatingsResponse:
        """Execute get user ratings flow.

        Raises:
            ValueError: If the user ID is not a valid UUID
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        ratings = await self.rating_service.get_user_ratings(user.id)

        topics = await self.topic_repository.find_by_ids([r.topic_id for r in ratings])
        topic_names = {topic.id: topic.name.root for topic in topics}

        return GetUserRatingsResponse(
            user_id=str(user.id),
            handle=user.handle.root,
            total=sum(r.amount for r in ratings),
            ratings=[
                TopicRating(
                    topic_id=str(r.topic_id),
                    topic_name=topic_names.get(r.topic_id),
                    amount=r.amount,
                )
                for r in ratings
            ],
        )
