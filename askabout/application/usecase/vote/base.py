"""Shared request/response models for vote use cases."""

from abc import abstractmethod
from uuid import UUID

from pydantic import BaseModel

from askabout.application.usecase.base import BaseUseCase
from askabout.domain.service import VoteOutcome, VoteService
from askabout.domain.value import SubjectType, UserId, VoteState


class VoteRequest(BaseModel):
    """Vote request."""

    subject_type: SubjectType
    subject_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class VoteResponse(BaseModel):
    """Vote response.

    ``rating_amount`` is the updated rating of the subject's author in the
    subject's topic.
    """

    subject_type: SubjectType
    subject_id: str
    state: VoteState
    delta: int
    author_id: str
    topic_id: str
    rating_amount: int


class VoteUseCase(BaseUseCase[VoteRequest, VoteResponse]):
    """Base for like, dislike and reset use cases."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the user, subject or prior vote is missing
            ConflictError: If the vote is redundant or lost a race
            StorageError: If persisting fails
        """
        outcome = await self._vote(
            request.subject_type,
            UUID(request.subject_id),
            UserId(UUID(request.user_id)),
        )
        return VoteResponse(
            subject_type=outcome.subject.subject_type,
            subject_id=str(outcome.subject.subject_id),
            state=outcome.state,
            delta=outcome.delta,
            author_id=str(outcome.subject.author_id),
            topic_id=str(outcome.subject.topic_id),
            rating_amount=outcome.rating_amount,
        )

    @abstractmethod
    async def _vote(
        self, subject_type: SubjectType, subject_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        pass
