"""Topic entity."""

from datetime import datetime

from pydantic import Field

from askabout.domain.model.common import DomainModel
from askabout.domain.value import TopicId, TopicName


class Topic(DomainModel):
    """Topic a question is asked in. Ratings are kept per topic."""

    id: TopicId
    name: TopicName
    created_at: datetime = Field(default_factory=datetime.now)
