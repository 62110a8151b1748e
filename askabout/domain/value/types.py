"""Domain value objects for AskAbout.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from askabout.domain.value.common import RootValueObject, ValueObject
from askabout.domain.value.identifiers import TopicId, UserId


class VoteState(str, Enum):
    """Current opinion recorded by a vote.

    A missing vote record means the actor never voted. ``NEUTRAL`` is a
    vote that was reset; the record is kept and reused.
    """

    LIKED = "liked"
    DISLIKED = "disliked"
    NEUTRAL = "neutral"


class VoteAction(str, Enum):
    """Action an actor can take on a subject."""

    LIKE = "like"
    DISLIKE = "dislike"
    RESET = "reset"


class SubjectType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    COMMENT = "comment"


class Handle(RootValueObject[str]):
    """User handle, 1-255 characters."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class TopicName(RootValueObject[str]):
    """Topic name.

    Letters, digits, spaces, dots, pluses, hashes and hyphens, 1-50 characters.
    Examples: 'Python', 'C#', 'Machine Learning'
    """

    @field_validator("root")
    @classmethod
    def validate_topic_name(cls, v: str) -> str:
        """Validate topic name format."""
        if not re.match(r"^[\w .+#-]{1,50}$", v) or not v.strip():
            raise ValueError(
                "Topic name must be 1-50 characters of letters, digits, "
                "spaces or '.+#-'"
            )
        return v


class Subject(ValueObject):
    """A resolved votable item.

    Carries what the rating engine needs: the content author and the topic
    whose rating a vote on this item moves.
    """

    subject_type: SubjectType
    subject_id: UUID
    topic_id: TopicId
    author_id: UserId
