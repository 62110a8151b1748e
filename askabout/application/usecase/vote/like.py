"""Like use case."""

from uuid import UUID

from askabout.domain.service import VoteOutcome
from askabout.domain.value import SubjectType, UserId

from .base import VoteUseCase


class LikeUseCase(VoteUseCase):
    """Use case for liking a question or comment."""

    async def _vote(
        self, subject_type: SubjectType, subject_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        return await self.vote_service.like(subject_type, subject_id, user_id)
