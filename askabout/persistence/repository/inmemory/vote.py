"""In-memory vote repository for testing.

Every check-and-write below runs without an ``await`` in between, so it is
atomic with respect to other coroutines on the event loop.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from askabout.domain.model.vote import Vote
from askabout.domain.repository.vote import VoteRepository
from askabout.domain.value import SubjectType, UserId, VoteId, VoteState


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, SubjectType, UUID], Vote] = {}

    async def find_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and subject."""
        return self._votes.get((user_id, subject_type, UUID(str(subject_id))))

    async def create_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the user already voted on the subject."""
        key = (vote.user_id, vote.subject_type, vote.subject_id)
        if key in self._votes:
            return False
        self._votes[key] = vote
        return True

    async def compare_and_set_state(
        self,
        vote_id: VoteId,
        expected: VoteState,
        new: VoteState,
    ) -> bool:
        """Update the vote state only where it still equals expected."""
        for key, vote in self._votes.items():
            if vote.id == vote_id:
                if vote.state != expected:
                    return False
                self._votes[key] = vote.model_copy(
                    update={"state": new, "updated_at": datetime.now()}
                )
                return True
        return False

    async def count_by_subject(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> dict[VoteState, int]:
        """Count votes on a subject grouped by state."""
        subject_uuid = UUID(str(subject_id))
        counts = {state: 0 for state in VoteState}
        for (_, vote_subject_type, vote_subject_id), vote in self._votes.items():
            if vote_subject_type == subject_type and vote_subject_id == subject_uuid:
                counts[vote.state] += 1
        return counts

    def count(self) -> int:
        """Total number of stored votes."""
        return len(self._votes)
