"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError

from askabout.domain.error import (
    AlreadyVotedError,
    ConflictError,
    NotFoundError,
    StorageError,
)
from askabout.domain.model import Vote
from askabout.domain.service import (
    RatingService,
    SubjectService,
    UserService,
    VoteService,
)
from askabout.domain.value import SubjectType, UserId, VoteState
from askabout.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import seed_forum
from tests.di import InMemoryStore
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def store(unit_env) -> InMemoryStore:
    return await unit_env.get(InMemoryStore)


@pytest_asyncio.fixture
async def vote_service(unit_env) -> VoteService:
    return await unit_env.get(VoteService)


async def author_rating(store: InMemoryStore, forum) -> int:
    rating = await store.ratings.find_by_user_and_topic(forum.asker.id, forum.topic.id)
    return rating.amount


class TestLikeDislike:
    """Tests for like and dislike."""

    @pytest.mark.asyncio
    async def test_first_like_creates_vote_and_rating(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act
        outcome = await vote_service.like(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.state == VoteState.LIKED
        assert outcome.delta == 1
        assert outcome.rating_amount == 1
        assert outcome.subject.author_id == forum.asker.id
        assert outcome.subject.topic_id == forum.topic.id

        vote = await store.votes.find_by_user_and_subject(
            forum.voter.id, SubjectType.QUESTION, forum.question.id
        )
        assert vote.state == VoteState.LIKED
        assert store.ratings.count() == 1
        assert await author_rating(store, forum) == 1

    @pytest.mark.asyncio
    async def test_first_dislike_makes_rating_negative(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act
        outcome = await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.state == VoteState.DISLIKED
        assert outcome.rating_amount == -1

    @pytest.mark.asyncio
    async def test_like_twice_conflicts(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await vote_service.like(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert await author_rating(store, forum) == 1
        assert store.votes.count() == 1

    @pytest.mark.asyncio
    async def test_dislike_twice_conflicts(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await vote_service.dislike(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert await author_rating(store, forum) == -1

    @pytest.mark.asyncio
    async def test_like_then_dislike_swings_by_two(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Act
        outcome = await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.delta == -2
        assert outcome.rating_amount == -1
        assert store.votes.count() == 1

    @pytest.mark.asyncio
    async def test_dislike_then_like_swings_by_two(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Act
        outcome = await vote_service.like(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.delta == 2
        assert outcome.rating_amount == 1

    @pytest.mark.asyncio
    async def test_comment_vote_rates_commenter_in_question_topic(
        self, store, vote_service
    ):
        # Arrange
        forum = await seed_forum(store)

        # Act
        outcome = await vote_service.like(
            SubjectType.COMMENT, forum.comment.id, forum.voter.id
        )

        # Assert
        assert outcome.subject.author_id == forum.commenter.id
        assert outcome.subject.topic_id == forum.topic.id
        rating = await store.ratings.find_by_user_and_topic(
            forum.commenter.id, forum.topic.id
        )
        assert rating.amount == 1
        assert (
            await store.ratings.find_by_user_and_topic(forum.asker.id, forum.topic.id)
            is None
        )

    @pytest.mark.asyncio
    async def test_votes_from_different_actors_accumulate(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)
        await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.other_voter.id
        )
        await vote_service.like(
            SubjectType.QUESTION, forum.question.id, forum.commenter.id
        )

        # Assert
        assert await author_rating(store, forum) == 1
        assert store.votes.count() == 3
        assert store.ratings.count() == 1

    @pytest.mark.asyncio
    async def test_existing_rating_is_reused(self, store, unit_env, vote_service):
        # Arrange
        forum = await seed_forum(store)
        rating_service = await unit_env.get(RatingService)
        existing = await rating_service.ensure_rating(forum.asker.id, forum.topic.id)

        # Act
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Assert
        rating = await store.ratings.find_by_user_and_topic(
            forum.asker.id, forum.topic.id
        )
        assert rating.id == existing.id
        assert rating.amount == 1

    @pytest.mark.asyncio
    async def test_successful_vote_commits(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Assert
        assert store.transaction.commits == 1
        assert store.transaction.rollbacks == 0


class TestResetVote:
    """Tests for reset_vote."""

    @pytest.mark.asyncio
    async def test_like_then_reset_returns_to_zero(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Act
        outcome = await vote_service.reset_vote(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.state == VoteState.NEUTRAL
        assert outcome.delta == -1
        assert outcome.rating_amount == 0

        vote = await store.votes.find_by_user_and_subject(
            forum.voter.id, SubjectType.QUESTION, forum.question.id
        )
        assert vote.state == VoteState.NEUTRAL

    @pytest.mark.asyncio
    async def test_dislike_then_reset_returns_to_zero(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Act
        outcome = await vote_service.reset_vote(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.delta == 1
        assert outcome.rating_amount == 0

    @pytest.mark.asyncio
    async def test_second_reset_is_not_found(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)
        await vote_service.reset_vote(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.reset_vote(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert await author_rating(store, forum) == 0

    @pytest.mark.asyncio
    async def test_reset_without_vote_is_not_found(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(
            SubjectType.QUESTION, forum.question.id, forum.other_voter.id
        )

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.reset_vote(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert exc_info.value.resource == "Vote"
        assert await author_rating(store, forum) == 1
        assert store.transaction.rollbacks == 1

    @pytest.mark.asyncio
    async def test_reset_never_creates_rating(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.reset_vote(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert store.ratings.count() == 0
        assert store.votes.count() == 0

    @pytest.mark.asyncio
    async def test_reset_with_missing_rating_leaves_vote(self, store, vote_service):
        # Arrange: a vote whose rating row was never created
        forum = await seed_forum(store)
        await store.votes.create_if_absent(
            Vote(
                id=uuid4(),
                user_id=forum.voter.id,
                subject_type=SubjectType.QUESTION,
                subject_id=forum.question.id,
                state=VoteState.LIKED,
            )
        )

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.reset_vote(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert exc_info.value.resource == "Rating"
        vote = await store.votes.find_by_user_and_subject(
            forum.voter.id, SubjectType.QUESTION, forum.question.id
        )
        assert vote.state == VoteState.LIKED

    @pytest.mark.asyncio
    async def test_vote_after_reset_reuses_record(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)
        await vote_service.reset_vote(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )
        first = await store.votes.find_by_user_and_subject(
            forum.voter.id, SubjectType.QUESTION, forum.question.id
        )

        # Act
        outcome = await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert outcome.delta == -1
        assert outcome.rating_amount == -1
        vote = await store.votes.find_by_user_and_subject(
            forum.voter.id, SubjectType.QUESTION, forum.question.id
        )
        assert vote.id == first.id
        assert store.votes.count() == 1


class TestLookupFailures:
    """Tests for unknown actors and subjects."""

    @pytest.mark.asyncio
    async def test_unknown_user(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.like(
                SubjectType.QUESTION, forum.question.id, UserId(uuid4())
            )

        assert exc_info.value.resource == "User"
        assert store.votes.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_question(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.like(SubjectType.QUESTION, uuid4(), forum.voter.id)

        assert exc_info.value.resource == "Question"

    @pytest.mark.asyncio
    async def test_unknown_comment(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.dislike(SubjectType.COMMENT, uuid4(), forum.voter.id)

        assert exc_info.value.resource == "Comment"

    @pytest.mark.asyncio
    async def test_comment_of_missing_question(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        orphan = forum.comment.model_copy(
            update={"id": uuid4(), "question_id": uuid4()}
        )
        await store.comments.save(orphan)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.like(SubjectType.COMMENT, orphan.id, forum.voter.id)

        assert exc_info.value.resource == "Question"


class TestConcurrency:
    """Tests for concurrent votes."""

    @pytest.mark.asyncio
    async def test_concurrent_likes_from_two_actors(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act
        await asyncio.gather(
            vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id),
            vote_service.like(
                SubjectType.QUESTION, forum.question.id, forum.other_voter.id
            ),
        )

        # Assert
        assert await author_rating(store, forum) == 2
        assert store.ratings.count() == 1

    @pytest.mark.asyncio
    async def test_concurrent_likes_from_one_actor(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)

        # Act
        results = await asyncio.gather(
            vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id),
            vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id),
            return_exceptions=True,
        )

        # Assert
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        successes = [r for r in results if not isinstance(r, Exception)]
        assert len(successes) == 1
        assert len(conflicts) == 1
        assert store.votes.count() == 1
        assert await author_rating(store, forum) == 1

    @pytest.mark.asyncio
    async def test_interleaved_first_likes_from_one_actor(self, store):
        """Both calls see no vote; the insert decides which one wins."""
        # Arrange
        forum = await seed_forum(store)
        vote_service = _vote_service_with(store, _YieldingVoteRepository())

        # Act
        results = await asyncio.gather(
            vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id),
            vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id),
            return_exceptions=True,
        )

        # Assert
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        successes = [r for r in results if not isinstance(r, Exception)]
        assert len(successes) == 1
        assert len(conflicts) == 1
        assert not isinstance(conflicts[0], AlreadyVotedError)
        assert vote_service.vote_repository.count() == 1
        assert await author_rating(store, forum) == 1
        assert store.transaction.rollbacks == 1

    @pytest.mark.asyncio
    async def test_interleaved_likes_from_two_actors(self, store):
        # Arrange
        forum = await seed_forum(store)
        vote_service = _vote_service_with(store, _YieldingVoteRepository())

        # Act
        await asyncio.gather(
            vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id),
            vote_service.like(
                SubjectType.QUESTION, forum.question.id, forum.other_voter.id
            ),
        )

        # Assert
        assert await author_rating(store, forum) == 2
        assert store.ratings.count() == 1

    @pytest.mark.asyncio
    async def test_vote_changed_after_read_conflicts(self, store):
        # Arrange
        forum = await seed_forum(store)
        votes = _RacingVoteRepository()
        vote_service = VoteService(
            vote_repository=votes,
            user_service=UserService(store.users),
            subject_service=SubjectService(store.questions, store.comments),
            rating_service=RatingService(store.ratings),
            transaction=store.transaction,
        )
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Act & Assert
        with pytest.raises(ConflictError):
            await vote_service.reset_vote(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert store.transaction.rollbacks == 1
        assert await author_rating(store, forum) == 1


def _vote_service_with(
    store: InMemoryStore, votes: InMemoryVoteRepository
) -> VoteService:
    return VoteService(
        vote_repository=votes,
        user_service=UserService(store.users),
        subject_service=SubjectService(store.questions, store.comments),
        rating_service=RatingService(store.ratings),
        transaction=store.transaction,
    )


class _YieldingVoteRepository(InMemoryVoteRepository):
    async def find_by_user_and_subject(self, user_id, subject_type, subject_id):
        vote = await super().find_by_user_and_subject(user_id, subject_type, subject_id)
        # Let the other request read before either writes
        await asyncio.sleep(0)
        return vote


class _RacingVoteRepository(InMemoryVoteRepository):
    async def compare_and_set_state(self, vote_id, expected, new) -> bool:
        # Another request flips the vote between our read and our write
        await super().compare_and_set_state(vote_id, expected, VoteState.DISLIKED)
        return await super().compare_and_set_state(vote_id, expected, new)


class _FailingVoteRepository(InMemoryVoteRepository):
    async def create_if_absent(self, vote: Vote) -> bool:
        raise OperationalError("INSERT INTO votes", {}, Exception("connection lost"))


class TestStorageFailure:
    """Tests for database failures while persisting."""

    @pytest.mark.asyncio
    async def test_database_error_rolls_back(self, store):
        # Arrange
        forum = await seed_forum(store)
        vote_service = VoteService(
            vote_repository=_FailingVoteRepository(),
            user_service=UserService(store.users),
            subject_service=SubjectService(store.questions, store.comments),
            rating_service=RatingService(store.ratings),
            transaction=store.transaction,
        )

        # Act & Assert
        with pytest.raises(StorageError):
            await vote_service.like(
                SubjectType.QUESTION, forum.question.id, forum.voter.id
            )

        assert store.transaction.rollbacks == 1
        assert store.transaction.commits == 0
        assert store.ratings.count() == 0


class TestVoteSummary:
    """Tests for get_vote_summary."""

    @pytest.mark.asyncio
    async def test_counts_likes_and_dislikes(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)
        await vote_service.like(
            SubjectType.QUESTION, forum.question.id, forum.other_voter.id
        )
        await vote_service.dislike(
            SubjectType.QUESTION, forum.question.id, forum.commenter.id
        )

        # Act
        summary = await vote_service.get_vote_summary(
            SubjectType.QUESTION, forum.question.id, forum.voter.id
        )

        # Assert
        assert summary.likes == 2
        assert summary.dislikes == 1
        assert summary.score == 1
        assert summary.viewer_state == VoteState.LIKED

    @pytest.mark.asyncio
    async def test_reset_votes_are_not_counted(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.COMMENT, forum.comment.id, forum.voter.id)
        await vote_service.reset_vote(
            SubjectType.COMMENT, forum.comment.id, forum.voter.id
        )

        # Act
        summary = await vote_service.get_vote_summary(
            SubjectType.COMMENT, forum.comment.id, forum.voter.id
        )

        # Assert
        assert summary.likes == 0
        assert summary.dislikes == 0
        assert summary.viewer_state is None

    @pytest.mark.asyncio
    async def test_anonymous_viewer(self, store, vote_service):
        # Arrange
        forum = await seed_forum(store)
        await vote_service.like(SubjectType.QUESTION, forum.question.id, forum.voter.id)

        # Act
        summary = await vote_service.get_vote_summary(
            SubjectType.QUESTION, forum.question.id
        )

        # Assert
        assert summary.likes == 1
        assert summary.viewer_state is None

    @pytest.mark.asyncio
    async def test_unknown_subject(self, store, vote_service):
        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.get_vote_summary(SubjectType.QUESTION, uuid4())
