"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askabout.domain.model.common import DomainModel
from askabout.domain.value import QuestionId, TopicId, UserId


class Question(DomainModel):
    """Question asked by a user within a topic.

    Questions can be liked or disliked; votes move the author's rating
    in the question's topic.
    """

    id: QuestionId
    topic_id: TopicId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    text: Optional[str] = Field(default=None, max_length=10000)
    attachment: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
