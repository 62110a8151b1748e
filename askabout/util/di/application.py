"""Application layer DI providers."""

from dishka import Scope, provide

from askabout.application.usecase.rating import GetUserRatingsUseCase
from askabout.application.usecase.vote import (
    DislikeUseCase,
    GetVoteSummaryUseCase,
    LikeUseCase,
    ResetVoteUseCase,
)
from askabout.domain.repository import TopicRepository
from askabout.domain.service import RatingService, UserService, VoteService
from askabout.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_like_use_case(self, vote_service: VoteService) -> LikeUseCase:
        """Provide like use case."""
        return LikeUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_dislike_use_case(self, vote_service: VoteService) -> DislikeUseCase:
        """Provide dislike use case."""
        return DislikeUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_vote_use_case(self, vote_service: VoteService) -> ResetVoteUseCase:
        """Provide reset vote use case."""
        return ResetVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_summary_use_case(
        self, vote_service: VoteService
    ) -> GetVoteSummaryUseCase:
        """Provide get vote summary use case."""
        return GetVoteSummaryUseCase(vote_service=vote_service)

    # Rating use cases
    @provide(scope=Scope.REQUEST)
    def get_user_ratings_use_case(
        self,
        user_service: UserService,
        rating_service: RatingService,
        topic_repository: TopicRepository,
    ) -> GetUserRatingsUseCase:
        """Provide get user ratings use case."""
        return GetUserRatingsUseCase(
            user_service=user_service,
            rating_service=rating_service,
            topic_repository=topic_repository,
        )
