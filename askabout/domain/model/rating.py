"""Rating aggregate.

Denormalized reputation score of a user within a topic. Votes on the
user's questions and comments in that topic move the amount.
"""

from datetime import datetime

from pydantic import Field

from askabout.domain.model.common import DomainModel
from askabout.domain.value import RatingId, TopicId, UserId


class Rating(DomainModel):
    """Rating of a user in a topic.

    Business rules:
    - One rating per (user, topic) (enforced by database unique constraint)
    - Amount is a signed integer and may go negative
    - Created lazily with amount 0
    """

    id: RatingId
    user_id: UserId
    topic_id: TopicId
    amount: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
