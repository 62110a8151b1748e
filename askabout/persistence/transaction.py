"""SQLAlchemy implementation of the Transaction port."""

from sqlalchemy.ext.asyncio import AsyncSession

from askabout.domain.repository import Transaction


class SessionTransaction(Transaction):
    """Commits or rolls back the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
