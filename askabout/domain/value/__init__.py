"""Domain value objects for AskAbout."""

from askabout.domain.value.identifiers import (
    CommentId,
    QuestionId,
    RatingId,
    TopicId,
    UserId,
    VoteId,
)
from askabout.domain.value.types import (
    Handle,
    Subject,
    SubjectType,
    TopicName,
    VoteAction,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "QuestionId",
    "CommentId",
    "VoteId",
    "RatingId",
    # Types
    "Handle",
    "TopicName",
    "Subject",
    "SubjectType",
    "VoteAction",
    "VoteState",
]
