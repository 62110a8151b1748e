"""Reset vote use case."""

from uuid import UUID

from askabout.domain.service import VoteOutcome
from askabout.domain.value import SubjectType, UserId

from .base import VoteUseCase


class ResetVoteUseCase(VoteUseCase):
    """Use case for withdrawing a like or dislike.

    The vote record is kept in the neutral state.
    """

    async def _vote(
        self, subject_type: SubjectType, subject_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        return await self.vote_service.reset_vote(subject_type, subject_id, user_id)
