"""PostgreSQL user repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askabout.domain.model import User
from askabout.domain.repository import UserRepository
from askabout.domain.value import UserId
from askabout.persistence.mappers import row_to_user, user_to_dict
from askabout.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Upsert on ID; only the handle can change."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={"handle": stmt.excluded.handle},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
