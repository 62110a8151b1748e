"""Repository interfaces for AskAbout domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from askabout.domain.repository.comment import CommentRepository
from askabout.domain.repository.question import QuestionRepository
from askabout.domain.repository.rating import RatingRepository
from askabout.domain.repository.topic import TopicRepository
from askabout.domain.repository.transaction import Transaction
from askabout.domain.repository.user import UserRepository
from askabout.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "TopicRepository",
    "QuestionRepository",
    "CommentRepository",
    "VoteRepository",
    "RatingRepository",
    "Transaction",
]
