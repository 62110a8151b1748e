"""Domain layer DI providers."""

from dishka import Scope, provide

from askabout.config import AuthSettings
from askabout.domain.repository import (
    CommentRepository,
    QuestionRepository,
    RatingRepository,
    Transaction,
    UserRepository,
    VoteRepository,
)
from askabout.domain.service import (
    JWTService,
    RatingService,
    SubjectService,
    UserService,
    VoteService,
)
from askabout.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_subject_service(
        self,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
    ) -> SubjectService:
        """Provide subject lookup domain service."""
        return SubjectService(
            question_repository=question_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_rating_service(self, rating_repository: RatingRepository) -> RatingService:
        """Provide rating domain service."""
        return RatingService(rating_repository=rating_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        user_service: UserService,
        subject_service: SubjectService,
        rating_service: RatingService,
        transaction: Transaction,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            user_service=user_service,
            subject_service=subject_service,
            rating_service=rating_service,
            transaction=transaction,
        )
