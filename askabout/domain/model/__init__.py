"""Domain model entities for AskAbout."""

from askabout.domain.model.comment import Comment
from askabout.domain.model.question import Question
from askabout.domain.model.rating import Rating
from askabout.domain.model.topic import Topic
from askabout.domain.model.user import User
from askabout.domain.model.vote import Vote

__all__ = [
    "User",
    "Topic",
    "Question",
    "Comment",
    "Vote",
    "Rating",
]
