"""Transaction port."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """Unit of work boundary for a request.

    Domain services commit once their writes form a consistent state, so a
    successful operation is durable before it returns.
    """

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
