"""Persistence component providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from askabout.config import DatabaseSettings, Settings
from askabout.domain.repository import (
    CommentRepository,
    QuestionRepository,
    RatingRepository,
    TopicRepository,
    Transaction,
    UserRepository,
    VoteRepository,
)
from askabout.persistence.database import create_engine, create_session_factory
from askabout.persistence.repository import (
    PostgresCommentRepository,
    PostgresQuestionRepository,
    PostgresRatingRepository,
    PostgresTopicRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from askabout.persistence.transaction import SessionTransaction
from askabout.util.di.base import ProviderBase
from askabout.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories and the Transaction port. Mocked in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings, database: DatabaseSettings) -> AsyncEngine:
        engine = create_engine(database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's session.

        Vote operations commit through the Transaction themselves. Whatever
        is still pending when the request ends is committed, or rolled back
        if the request failed.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back request session", error=str(e))
                await session.rollback()
                raise

    transaction = provide(SessionTransaction, provides=Transaction)
    users = provide(PostgresUserRepository, provides=UserRepository)
    topics = provide(PostgresTopicRepository, provides=TopicRepository)
    questions = provide(PostgresQuestionRepository, provides=QuestionRepository)
    comments = provide(PostgresCommentRepository, provides=CommentRepository)
    votes = provide(PostgresVoteRepository, provides=VoteRepository)
    ratings = provide(PostgresRatingRepository, provides=RatingRepository)
