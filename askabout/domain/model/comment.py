"""Comment entity.

Comments are attached to replies under a question. For rating purposes
a comment belongs to its question's topic.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askabout.domain.model.common import DomainModel
from askabout.domain.value import CommentId, QuestionId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    question_id: QuestionId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    attachment: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
