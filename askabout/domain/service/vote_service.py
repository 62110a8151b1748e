"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from askabout.domain.error import ConflictError, DomainError, StorageError
from askabout.domain.model.vote import Vote
from askabout.domain.repository import Transaction, VoteRepository
from askabout.domain.value import (
    Subject,
    SubjectType,
    UserId,
    VoteAction,
    VoteId,
    VoteState,
)

from .base import Service
from .rating_service import RatingService
from .subject_service import SubjectService
from .user_service import UserService
from .vote_rules import VoteTransition, plan_transition


@dataclass
class VoteOutcome:
    """Result of a successful vote operation."""

    subject: Subject
    state: VoteState
    delta: int
    rating_amount: int


@dataclass
class VoteSummary:
    """Vote counts on a subject, plus the viewer's own vote if known."""

    subject: Subject
    likes: int
    dislikes: int
    viewer_state: Optional[VoteState]

    @property
    def score(self) -> int:
        return self.likes - self.dislikes


class VoteService(Service):
    """Domain service for like/dislike/reset operations.

    Each operation reads the actor's current vote, applies the transition
    from ``vote_rules`` and moves the rating of the subject's author in the
    subject's topic, then commits.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        user_service: UserService,
        subject_service: SubjectService,
        rating_service: RatingService,
        transaction: Transaction,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            user_service: User domain service
            subject_service: Subject lookup service
            rating_service: Rating domain service
            transaction: Transaction of the current request
        """
        self.vote_repository = vote_repository
        self.user_service = user_service
        self.subject_service = subject_service
        self.rating_service = rating_service
        self.transaction = transaction

    async def like(
        self, subject_type: SubjectType, subject_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        """Like a question or comment.

        Raises:
            NotFoundError: If the user or subject does not exist
            AlreadyVotedError: If the user already likes the subject
            StorageError: If persisting the change fails
        """
        return await self._apply(VoteAction.LIKE, subject_type, subject_id, user_id)

    async def dislike(
        self, subject_type: SubjectType, subject_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        """Dislike a question or comment.

        Raises:
            NotFoundError: If the user or subject does not exist
            AlreadyVotedError: If the user already dislikes the subject
            StorageError: If persisting the change fails
        """
        return await self._apply(VoteAction.DISLIKE, subject_type, subject_id, user_id)

    async def reset_vote(
        self, subject_type: SubjectType, subject_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        """Withdraw the user's like or dislike.

        Raises:
            NotFoundError: If the user, subject, current vote or rating is missing
            StorageError: If persisting the change fails
        """
        return await self._apply(VoteAction.RESET, subject_type, subject_id, user_id)

    async def get_vote_summary(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
        viewer_id: Optional[UserId] = None,
    ) -> VoteSummary:
        """Count likes and dislikes on a subject.

        Args:
            subject_type: Type of subject
            subject_id: Subject ID
            viewer_id: User whose own vote to report (optional)

        Returns:
            Vote summary

        Raises:
            NotFoundError: If the subject does not exist
        """
        with logfire.span(
            "vote_service.get_vote_summary",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
        ):
            subject = await self.subject_service.resolve(subject_type, subject_id)
            counts = await self.vote_repository.count_by_subject(
                subject_type, subject_id
            )

            viewer_state = None
            if viewer_id is not None:
                vote = await self.vote_repository.find_by_user_and_subject(
                    viewer_id, subject_type, subject_id
                )
                if vote and vote.state != VoteState.NEUTRAL:
                    viewer_state = vote.state

            return VoteSummary(
                subject=subject,
                likes=counts.get(VoteState.LIKED, 0),
                dislikes=counts.get(VoteState.DISLIKED, 0),
                viewer_state=viewer_state,
            )

    async def _apply(
        self,
        action: VoteAction,
        subject_type: SubjectType,
        subject_id: UUID,
        user_id: UserId,
    ) -> VoteOutcome:
        with logfire.span(
            f"vote_service.{action.value}",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            user_id=str(user_id),
        ):
            try:
                await self.user_service.get_by_id(user_id)
                subject = await self.subject_service.resolve(subject_type, subject_id)

                current = await self.vote_repository.find_by_user_and_subject(
                    user_id, subject_type, subject_id
                )
                transition = plan_transition(
                    current.state if current else None, action, subject
                )

                # A reset needs the rating row; check before touching the vote
                if action == VoteAction.RESET:
                    await self.rating_service.get_rating(
                        subject.author_id, subject.topic_id
                    )

                await self._write_vote(current, transition, subject, user_id)
                amount = await self.rating_service.apply_delta(
                    subject.author_id,
                    subject.topic_id,
                    transition.delta,
                    create_missing=action != VoteAction.RESET,
                )

                await self.transaction.commit()
            except SQLAlchemyError as e:
                logfire.error(
                    "Vote transaction failed",
                    action=action.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await self.transaction.rollback()
                raise StorageError(f"Failed to persist {action.value}: {e}") from e
            except DomainError as e:
                logfire.warn(
                    "Vote rejected",
                    action=action.value,
                    subject_id=str(subject_id),
                    user_id=str(user_id),
                    reason=str(e),
                )
                await self.transaction.rollback()
                raise

            logfire.info(
                "Vote applied",
                action=action.value,
                subject_type=subject_type.value,
                subject_id=str(subject_id),
                user_id=str(user_id),
                state=transition.new.value,
                delta=transition.delta,
                rating_amount=amount,
            )
            return VoteOutcome(
                subject=subject,
                state=transition.new,
                delta=transition.delta,
                rating_amount=amount,
            )

    async def _write_vote(
        self,
        current: Optional[Vote],
        transition: VoteTransition,
        subject: Subject,
        user_id: UserId,
    ) -> None:
        """Persist the vote change, failing if another request got there first."""
        if current is None:
            now = datetime.now()
            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                subject_type=subject.subject_type,
                subject_id=subject.subject_id,
                state=transition.new,
                created_at=now,
                updated_at=now,
            )
            written = await self.vote_repository.create_if_absent(vote)
        else:
            written = await self.vote_repository.compare_and_set_state(
                current.id, current.state, transition.new
            )

        if not written:
            raise ConflictError(
                f"Vote on {subject.subject_type.value} {subject.subject_id} "
                "was changed by a concurrent request"
            )
