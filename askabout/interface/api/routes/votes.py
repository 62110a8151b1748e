"""Vote routes.

Like, dislike and reset are GET endpoints for compatibility with the
existing frontend, which calls them from plain links.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from askabout.application.usecase.vote import (
    DislikeUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryResponse,
    GetVoteSummaryUseCase,
    LikeUseCase,
    ResetVoteUseCase,
    VoteRequest,
    VoteResponse,
    VoteUseCase,
)
from askabout.domain.error import DomainError
from askabout.domain.service import JWTService
from askabout.domain.value import SubjectType
from askabout.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


async def _vote(
    use_case: VoteUseCase,
    subject_type: SubjectType,
    subject_id: str,
    jwt_service: JWTService,
    auth_token: str | None,
) -> VoteResponse:
    """Authenticate the caller and run a vote use case."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        request = VoteRequest(
            subject_type=subject_type,
            subject_id=subject_id,
            user_id=user_id,
        )
        return await use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


async def _summary(
    use_case: GetVoteSummaryUseCase,
    subject_type: SubjectType,
    subject_id: str,
    jwt_service: JWTService,
    auth_token: str | None,
) -> GetVoteSummaryResponse:
    """Run the vote summary use case; authentication is optional."""
    try:
        request = GetVoteSummaryRequest(
            subject_type=subject_type,
            subject_id=subject_id,
            viewer_id=jwt_service.get_user_id_from_token(auth_token),
        )
        return await use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


# Questions


@router.get("/questions/{question_id}/like", response_model=VoteResponse)
async def like_question(
    question_id: str,
    like_use_case: FromDishka[LikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Like a question.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the question or user
            is unknown, 409 if already liked
    """
    return await _vote(
        like_use_case, SubjectType.QUESTION, question_id, jwt_service, auth_token
    )


@router.get("/questions/{question_id}/dislike", response_model=VoteResponse)
async def dislike_question(
    question_id: str,
    dislike_use_case: FromDishka[DislikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Dislike a question.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the question or user
            is unknown, 409 if already disliked
    """
    return await _vote(
        dislike_use_case, SubjectType.QUESTION, question_id, jwt_service, auth_token
    )


@router.get("/questions/{question_id}/reset-vote", response_model=VoteResponse)
async def reset_question_vote(
    question_id: str,
    reset_vote_use_case: FromDishka[ResetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Withdraw a like or dislike from a question.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if there is no vote to
            reset or the question or user is unknown
    """
    return await _vote(
        reset_vote_use_case, SubjectType.QUESTION, question_id, jwt_service, auth_token
    )


@router.get("/questions/{question_id}/votes", response_model=GetVoteSummaryResponse)
async def get_question_votes(
    question_id: str,
    vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteSummaryResponse:
    """Get like/dislike counts of a question.

    Includes the caller's own vote when authenticated.
    """
    return await _summary(
        vote_summary_use_case,
        SubjectType.QUESTION,
        question_id,
        jwt_service,
        auth_token,
    )


# Comments


@router.get("/comments/{comment_id}/like", response_model=VoteResponse)
async def like_comment(
    comment_id: str,
    like_use_case: FromDishka[LikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Like a comment.

    Requires authentication.
    """
    return await _vote(
        like_use_case, SubjectType.COMMENT, comment_id, jwt_service, auth_token
    )


@router.get("/comments/{comment_id}/dislike", response_model=VoteResponse)
async def dislike_comment(
    comment_id: str,
    dislike_use_case: FromDishka[DislikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Dislike a comment.

    Requires authentication.
    """
    return await _vote(
        dislike_use_case, SubjectType.COMMENT, comment_id, jwt_service, auth_token
    )


@router.get("/comments/{comment_id}/reset-vote", response_model=VoteResponse)
async def reset_comment_vote(
    comment_id: str,
    reset_vote_use_case: FromDishka[ResetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Withdraw a like or dislike from a comment.

    Requires authentication.
    """
    return await _vote(
        reset_vote_use_case, SubjectType.COMMENT, comment_id, jwt_service, auth_token
    )


@router.get("/comments/{comment_id}/votes", response_model=GetVoteSummaryResponse)
async def get_comment_votes(
    comment_id: str,
    vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteSummaryResponse:
    """Get like/dislike counts of a comment."""
    return await _summary(
        vote_summary_use_case,
        SubjectType.COMMENT,
        comment_id,
        jwt_service,
        auth_token,
    )
