"""Vote entity.

A vote records one actor's current opinion of one question or comment.
Business rules:
- One vote per user per subject (enforced by database unique constraint)
- Votes are never deleted; a reset keeps the record in the NEUTRAL state
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from askabout.domain.model.common import DomainModel
from askabout.domain.value import SubjectType, UserId, VoteId, VoteState


class Vote(DomainModel):
    """Vote entity."""

    id: VoteId
    user_id: UserId
    subject_type: SubjectType
    subject_id: UUID  # QuestionId or CommentId (both are UUIDs)
    state: VoteState
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
