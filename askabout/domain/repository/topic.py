"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from askabout.domain.model.topic import Topic
from askabout.domain.value import TopicId


class TopicRepository(ABC):
    """Repository for Topic entity."""

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> list[Topic]:
        """Find topics by IDs (batch query). Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Save a topic."""
        pass
