"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from askabout.domain.model.user import User
from askabout.domain.value import UserId


class UserRepository(ABC):
    """Users known to the vote engine.

    Accounts are created by the login flow; this service only looks them
    up to reject votes from unknown actors.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a user, or update the handle of an existing one."""
        pass
