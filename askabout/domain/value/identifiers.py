"""Identifiers of AskAbout entities.

All are UUIDs; the NewTypes keep a question ID from being passed where a
topic ID is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
TopicId = NewType("TopicId", UUID)
QuestionId = NewType("QuestionId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
RatingId = NewType("RatingId", UUID)
