"""Rating use cases."""

from .get_user_ratings import (
    GetUserRatingsRequest,
    GetUserRatingsResponse,
    GetUserRatingsUseCase,
    TopicRating,
)

__all__ = [
    "GetUserRatingsRequest",
    "GetUserRatingsResponse",
    "GetUserRatingsUseCase",
    "TopicRating",
]
