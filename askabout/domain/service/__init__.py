"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .rating_service import RatingService
from .subject_service import SubjectService
from .user_service import UserService
from .vote_rules import VoteTransition, plan_transition
from .vote_service import VoteOutcome, VoteService, VoteSummary

__all__ = [
    "JWTService",
    "RatingService",
    "Service",
    "SubjectService",
    "UserService",
    "VoteOutcome",
    "VoteService",
    "VoteSummary",
    "VoteTransition",
    "plan_transition",
]
