"""Dict-backed user repository."""

from typing import Optional

from askabout.domain.model.user import User
from askabout.domain.repository.user import UserRepository
from askabout.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._by_id: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._by_id.get(user_id)

    async def save(self, user: User) -> User:
        self._by_id[user.id] = user
        return user
