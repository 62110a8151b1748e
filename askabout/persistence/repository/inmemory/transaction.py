"""In-memory transaction for testing."""

from askabout.domain.repository.transaction import Transaction


class InMemoryTransaction(Transaction):
    """Records commits and rollbacks; in-memory writes are applied immediately."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
