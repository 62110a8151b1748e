"""Vote use cases."""

from .base import VoteRequest, VoteResponse, VoteUseCase
from .dislike import DislikeUseCase
from .get_vote_summary import (
    GetVoteSummaryRequest,
    GetVoteSummaryResponse,
    GetVoteSummaryUseCase,
)
from .like import LikeUseCase
from .reset_vote import ResetVoteUseCase

__all__ = [
    "VoteRequest",
    "VoteResponse",
    "VoteUseCase",
    "LikeUseCase",
    "DislikeUseCase",
    "ResetVoteUseCase",
    "GetVoteSummaryRequest",
    "GetVoteSummaryResponse",
    "GetVoteSummaryUseCase",
]
