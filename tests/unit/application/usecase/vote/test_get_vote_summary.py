"""Unit tests for GetVoteSummaryUseCase."""

from uuid import uuid4

import pytest

from askabout.application.usecase.vote import (
    DislikeUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    LikeUseCase,
    VoteRequest,
)
from askabout.domain.error import NotFoundError
from askabout.domain.value import SubjectType, VoteState
from tests.conftest import seed_forum
from tests.di import InMemoryStore
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetVoteSummaryUseCase:
    """Tests for GetVoteSummaryUseCase."""

    @pytest.mark.asyncio
    async def test_summary_with_viewer(self, unit_env):
        # Arrange
        forum = await seed_forum(await unit_env.get(InMemoryStore))
        like_use_case = await unit_env.get(LikeUseCase)
        dislike_use_case = await unit_env.get(DislikeUseCase)
        summary_use_case = await unit_env.get(GetVoteSummaryUseCase)

        await dislike_use_case.execute(
            VoteRequest(
                subject_type=SubjectType.QUESTION,
                subject_id=str(forum.question.id),
                user_id=str(forum.voter.id),
            )
        )
        await dislike_use_case.execute(
            VoteRequest(
                subject_type=SubjectType.QUESTION,
                subject_id=str(forum.question.id),
                user_id=str(forum.other_voter.id),
            )
        )
        await like_use_case.execute(
            VoteRequest(
                subject_type=SubjectType.QUESTION,
                subject_id=str(forum.question.id),
                user_id=str(forum.commenter.id),
            )
        )

        # Act
        response = await summary_use_case.execute(
            GetVoteSummaryRequest(
                subject_type=SubjectType.QUESTION,
                subject_id=str(forum.question.id),
                viewer_id=str(forum.voter.id),
            )
        )

        # Assert
        assert response.likes == 1
        assert response.dislikes == 2
        assert response.score == -1
        assert response.my_vote == VoteState.DISLIKED

    @pytest.mark.asyncio
    async def test_summary_without_votes(self, unit_env):
        # Arrange
        forum = await seed_forum(await unit_env.get(InMemoryStore))
        summary_use_case = await unit_env.get(GetVoteSummaryUseCase)

        # Act
        response = await summary_use_case.execute(
            GetVoteSummaryRequest(
                subject_type=SubjectType.COMMENT,
                subject_id=str(forum.comment.id),
            )
        )

        # Assert
        assert response.likes == 0
        assert response.dislikes == 0
        assert response.score == 0
        assert response.my_vote is None

    @pytest.mark.asyncio
    async def test_summary_unknown_subject(self, unit_env):
        # Arrange
        summary_use_case = await unit_env.get(GetVoteSummaryUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await summary_use_case.execute(
                GetVoteSummaryRequest(
                    subject_type=SubjectType.QUESTION, subject_id=str(uuid4())
                )
            )
