"""In-memory topic repository for testing."""

from typing import Optional, Sequence

from askabout.domain.model.topic import Topic
from askabout.domain.repository.topic import TopicRepository
from askabout.domain.value import TopicId


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self) -> None:
        self._topics: dict[TopicId, Topic] = {}

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        return self._topics.get(topic_id)

    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> list[Topic]:
        return [self._topics[tid] for tid in topic_ids if tid in self._topics]

    async def save(self, topic: Topic) -> Topic:
        self._topics[topic.id] = topic
        return topic
