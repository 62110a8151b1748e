"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .question import InMemoryQuestionRepository
from .rating import InMemoryRatingRepository
from .topic import InMemoryTopicRepository
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryQuestionRepository",
    "InMemoryRatingRepository",
    "InMemoryTopicRepository",
    "InMemoryTransaction",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
