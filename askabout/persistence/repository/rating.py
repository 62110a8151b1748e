"""PostgreSQL implementation of Rating repository."""

from typing import Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askabout.domain.model import Rating
from askabout.domain.repository import RatingRepository
from askabout.domain.value import TopicId, UserId
from askabout.persistence.mappers import rating_to_dict, row_to_rating
from askabout.persistence.tables import ratings_table


class PostgresRatingRepository(RatingRepository):
    """PostgreSQL implementation of RatingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_topic(
        self, user_id: UserId, topic_id: TopicId
    ) -> Optional[Rating]:
        """Find the rating of a user in a topic."""
        stmt = select(ratings_table).where(
            and_(
                ratings_table.c.user_id == user_id,
                ratings_table.c.topic_id == topic_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_rating(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> list[Rating]:
        """Find all ratings of a user, highest amount first."""
        stmt = (
            select(ratings_table)
            .where(ratings_table.c.user_id == user_id)
            .order_by(ratings_table.c.amount.desc(), ratings_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_rating(row._asdict()) for row in result.fetchall()]

    async def create_if_absent(self, rating: Rating) -> Rating:
        """Insert a rating unless the unique_rating constraint fires."""
        stmt = (
            insert(ratings_table)
            .values(**rating_to_dict(rating))
            .on_conflict_do_nothing(constraint="unique_rating")
        )
        await self.session.execute(stmt)
        await self.session.flush()

        stored = await self.find_by_user_and_topic(rating.user_id, rating.topic_id)
        return stored if stored else rating

    async def add_to_amount(
        self, user_id: UserId, topic_id: TopicId, delta: int
    ) -> Optional[int]:
        """Atomically add delta to the amount in a single UPDATE."""
        stmt = (
            update(ratings_table)
            .where(
                and_(
                    ratings_table.c.user_id == user_id,
                    ratings_table.c.topic_id == topic_id,
                )
            )
            .values(amount=ratings_table.c.amount + delta, updated_at=func.now())
            .returning(ratings_table.c.amount)
        )
        result = await self.session.execute(stmt)
        amount = result.scalar_one_or_none()
        await self.session.flush()
        return amount
