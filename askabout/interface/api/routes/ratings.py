"""Rating routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from askabout.application.usecase.rating import (
    GetUserRatingsRequest,
    GetUserRatingsResponse,
    GetUserRatingsUseCase,
)
from askabout.domain.error import DomainError
from askabout.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["ratings"], route_class=DishkaRoute)


@router.get("/{user_id}/ratings", response_model=GetUserRatingsResponse)
async def get_user_ratings(
    user_id: str,
    get_user_ratings_use_case: FromDishka[GetUserRatingsUseCase],
) -> GetUserRatingsResponse:
    """Get a user's rating in every topic they have been rated in.

    Raises:
        HTTPException: 404 if the user is unknown, 400 if the ID is malformed
    """
    try:
        return await get_user_ratings_use_case.execute(
            GetUserRatingsRequest(user_id=user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
