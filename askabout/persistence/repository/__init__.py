"""PostgreSQL repository implementations."""

from askabout.persistence.repository.comment import PostgresCommentRepository
from askabout.persistence.repository.question import PostgresQuestionRepository
from askabout.persistence.repository.rating import PostgresRatingRepository
from askabout.persistence.repository.topic import PostgresTopicRepository
from askabout.persistence.repository.user import PostgresUserRepository
from askabout.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTopicRepository",
    "PostgresQuestionRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresRatingRepository",
]
