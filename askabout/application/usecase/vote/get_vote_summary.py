"""Get vote summary use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from askabout.application.usecase.base import BaseUseCase
from askabout.domain.service import VoteService
from askabout.domain.value import SubjectType, UserId, VoteState


class GetVoteSummaryRequest(BaseModel):
    """Get vote summary request."""

    subject_type: SubjectType
    subject_id: str
    viewer_id: Optional[str] = None  # Authenticated user, if any


class GetVoteSummaryResponse(BaseModel):
    """Vote counts on a subject."""

    subject_type: SubjectType
    subject_id: str
    likes: int
    dislikes: int
    score: int
    my_vote: Optional[VoteState] = None


class GetVoteSummaryUseCase(
    BaseUseCase[GetVoteSummaryRequest, GetVoteSummaryResponse]
):
    """Use case for reading likes/dislikes of a question or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteSummaryRequest) -> GetVoteSummaryResponse:
        """Execute get vote summary flow.

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the subject does not exist
        """
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        summary = await self.vote_service.get_vote_summary(
            request.subject_type, UUID(request.subject_id), viewer_id
        )

        return GetVoteSummaryResponse(
            subject_type=summary.subject.subject_type,
            subject_id=str(summary.subject.subject_id),
            likes=summary.likes,
            dislikes=summary.dislikes,
            score=summary.score,
            my_vote=summary.viewer_state,
        )
