"""Vote routes.

Voting toggles: repeating a vote removes it, voting the other way
switches it.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status

from threadly.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from threadly.domain.service import JWTService
from threadly.domain.value import VotableType, VoteDirection
from threadly.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts/{post_id}", tags=["votes"], route_class=DishkaRoute)


async def _cast(
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
    votable_type: VotableType,
    direction: VoteDirection,
    post_id: str,
    comment_id: str | None = None,
    reply_id: str | None = None,
) -> Response:
    user_id = require_user_id(jwt_service, auth_token)

    await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=votable_type,
            direction=direction,
            post_id=post_id,
            comment_id=comment_id,
            reply_id=reply_id,
            user_id=user_id,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/upvote", status_code=status.HTTP_204_NO_CONTENT)
async def upvote_post(
    post_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle an upvote on a post.

    Requires authentication.

    Args:
        post_id: Post to vote on
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
    """
    return await _cast(
        cast_vote_use_case, jwt_service, auth_token, VotableType.POST, VoteDirection.UP, post_id
    )


@router.post("/downvote", status_code=status.HTTP_204_NO_CONTENT)
async def downvote_post(
    post_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle a downvote on a post."""
    return await _cast(
        cast_vote_use_case, jwt_service, auth_token, VotableType.POST, VoteDirection.DOWN, post_id
    )


@router.post("/comments/{comment_id}/upvote", status_code=status.HTTP_204_NO_CONTENT)
async def upvote_comment(
    post_id: str,
    comment_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle an upvote on a comment."""
    return await _cast(
        cast_vote_use_case,
        jwt_service,
        auth_token,
        VotableType.COMMENT,
        VoteDirection.UP,
        post_id,
        comment_id=comment_id,
    )


@router.post("/comments/{comment_id}/downvote", status_code=status.HTTP_204_NO_CONTENT)
async def downvote_comment(
    post_id: str,
    comment_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle a downvote on a comment."""
    return await _cast(
        cast_vote_use_case,
        jwt_service,
        auth_token,
        VotableType.COMMENT,
        VoteDirection.DOWN,
        post_id,
        comment_id=comment_id,
    )


@router.post(
    "/comments/{comment_id}/replies/{reply_id}/upvote",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def upvote_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle an upvote on a reply."""
    return await _cast(
        cast_vote_use_case,
        jwt_service,
        auth_token,
        VotableType.REPLY,
        VoteDirection.UP,
        post_id,
        comment_id=comment_id,
        reply_id=reply_id,
    )


@router.post(
    "/comments/{comment_id}/replies/{reply_id}/downvote",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def downvote_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Toggle a downvote on a reply."""
    return await _cast(
        cast_vote_use_case,
        jwt_service,
        auth_token,
        VotableType.REPLY,
        VoteDirection.DOWN,
        post_id,
        comment_id=comment_id,
        reply_id=reply_id,
    )
