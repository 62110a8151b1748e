"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from askabout.domain.model.vote import Vote
from askabout.domain.value import SubjectType, UserId, VoteId, VoteState


class VoteRepository(ABC):
    """Repository for Vote entity.

    Writes are conditional so that concurrent requests from the same
    actor on the same subject cannot both apply a transition.
    """

    @abstractmethod
    async def find_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific subject.

        Args:
            user_id: The user's ID
            subject_type: Type of subject (question or comment)
            subject_id: ID of the subject

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless one already exists for its user and subject.

        Args:
            vote: The vote to insert

        Returns:
            True if the vote was inserted, False if a vote already existed
        """
        pass

    @abstractmethod
    async def compare_and_set_state(
        self,
        vote_id: VoteId,
        expected: VoteState,
        new: VoteState,
    ) -> bool:
        """Change a vote's state only if it still holds the expected state.

        Args:
            vote_id: The vote ID
            expected: State the caller observed
            new: State to write

        Returns:
            True if the vote was updated, False if its state had changed
        """
        pass

    @abstractmethod
    async def count_by_subject(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> dict[VoteState, int]:
        """Count votes on a subject grouped by state.

        Args:
            subject_type: Type of subject (question or comment)
            subject_id: ID of the subject

        Returns:
            Mapping of every VoteState to its number of votes
        """
        pass
