"""User domain service."""

import logfire

from askabout.domain.error import NotFoundError
from askabout.domain.model import User
from askabout.domain.repository import UserRepository
from askabout.domain.value import UserId

from .base import Service


class UserService(Service):
    """Looks up the actors and rated authors of votes."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Return the user.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("Unknown user", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user
