"""PostgreSQL implementation of Vote repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askabout.domain.model import Vote
from askabout.domain.repository import VoteRepository
from askabout.domain.value import SubjectType, UserId, VoteId, VoteState
from askabout.persistence.mappers import row_to_vote, vote_to_dict
from askabout.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_subject(
        self,
        user_id: UserId,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific subject."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.subject_type == subject_type.value,
                votes_table.c.subject_id == subject_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def create_if_absent(self, vote: Vote) -> bool:
        """Insert a vote, doing nothing if the unique_vote constraint fires.

        A concurrent insert for the same user and subject blocks until the
        other transaction finishes, so only one of them reports True.
        """
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(constraint="unique_vote")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def compare_and_set_state(
        self,
        vote_id: VoteId,
        expected: VoteState,
        new: VoteState,
    ) -> bool:
        """Update the vote state only where it still equals expected."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.id == vote_id,
                    votes_table.c.state == expected.value,
                )
            )
            .values(state=new.value, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_subject(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
    ) -> dict[VoteState, int]:
        """Count votes on a subject grouped by state."""
        stmt = (
            select(votes_table.c.state, func.count())
            .where(
                and_(
                    votes_table.c.subject_type == subject_type.value,
                    votes_table.c.subject_id == subject_id,
                )
            )
            .group_by(votes_table.c.state)
        )
        result = await self.session.execute(stmt)
        counts = {state: 0 for state in VoteState}
        for state, count in result.all():
            counts[VoteState(state)] = count
        return counts
