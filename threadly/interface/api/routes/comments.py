"""Comment and reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from threadly.application.usecase.comment import (
    CommentListResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from threadly.application.usecase.views import CommentView, ReplyView
from threadly.domain.service import JWTService
from threadly.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/posts/{post_id}/comments", tags=["comments"], route_class=DishkaRoute
)


class CommentBodyAPIRequest(BaseModel):
    """API request carrying a comment or reply body."""

    # Empty bodies are rejected by the domain with a readable message
    body: str = ""


@router.post("", response_model=CommentListResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: str,
    request: CommentBodyAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentListResponse:
    """Add a comment to a post.

    Requires authentication.

    Args:
        post_id: Post being commented on
        request: Comment body
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Returns:
        The post's updated comment list
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, author_id=user_id, body=request.body)
    )


@router.patch("/{comment_id}", response_model=CommentView)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentBodyAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentView:
    """Edit a comment. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token)

    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            post_id=post_id, comment_id=comment_id, user_id=user_id, body=request.body
        )
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a comment together with its replies. Only the author can delete."""
    user_id = require_user_id(jwt_service, auth_token)

    await delete_comment_use_case.execute(
        DeleteCommentRequest(post_id=post_id, comment_id=comment_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{comment_id}/replies",
    response_model=CommentListResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    post_id: str,
    comment_id: str,
    request: CommentBodyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentListResponse:
    """Reply to a comment.

    Requires authentication.

    Args:
        post_id: Post holding the comment
        comment_id: Comment being replied to
        request: Reply body
        create_reply_use_case: Create reply use case from DI
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Returns:
        The post's updated comment list
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await create_reply_use_case.execute(
        CreateReplyRequest(
            post_id=post_id, comment_id=comment_id, author_id=user_id, body=request.body
        )
    )


@router.patch("/{comment_id}/replies/{reply_id}", response_model=ReplyView)
async def update_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    request: CommentBodyAPIRequest,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReplyView:
    """Edit a reply. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token)

    return await update_reply_use_case.execute(
        UpdateReplyRequest(
            post_id=post_id,
            comment_id=comment_id,
            reply_id=reply_id,
            user_id=user_id,
            body=request.body,
        )
    )


@router.delete("/{comment_id}/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a reply. Only the author can delete."""
    user_id = require_user_id(jwt_service, auth_token)

    await delete_reply_use_case.execute(
        DeleteReplyRequest(
            post_id=post_id, comment_id=comment_id, reply_id=reply_id, user_id=user_id
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
