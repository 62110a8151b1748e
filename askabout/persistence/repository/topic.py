"""PostgreSQL implementation of Topic repository."""

from typing import Optional, Sequence

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from askabout.domain.model import Topic
from askabout.domain.repository import TopicRepository
from askabout.domain.value import TopicId
from askabout.persistence.mappers import row_to_topic, topic_to_dict
from askabout.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        stmt = select(topics_table).where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> list[Topic]:
        """Find topics by IDs (batch query)."""
        if not topic_ids:
            return []

        stmt = select(topics_table).where(topics_table.c.id.in_(topic_ids))
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def save(self, topic: Topic) -> Topic:
        """Save a topic (create)."""
        stmt = insert(topics_table).values(**topic_to_dict(topic))
        await self.session.execute(stmt)
        await self.session.flush()
        return topic
