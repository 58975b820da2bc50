"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from pydantic import BaseModel

from threadly.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from threadly.application.usecase.views import PostView
from threadly.domain.repository.post import PostSortOrder
from threadly.domain.service import JWTService
from threadly.domain.value import ImageSubmission, PostType
from threadly.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Length and presence rules are checked by the domain so that they
    surface as the regular error envelope.
    """

    subreddit_id: str
    post_type: PostType
    title: str = ""
    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: ImageSubmission | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for replacing a post's submission."""

    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: ImageSubmission | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    sort: PostSortOrder = Query(default=PostSortOrder.HOT),
    subreddit_id: str | None = Query(default=None),
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> ListPostsResponse:
    """List posts.

    Args:
        list_posts_use_case: List posts use case from DI
        sort: Sort order (hot, best, top, new, old, controversial)
        subreddit_id: Only posts of this subreddit
        page: 1-based page number, invalid values fall back to 1
        limit: Page size, clamped to the configured maximum

    Returns:
        One page of posts with pagination info
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(sort=sort, subreddit_id=subreddit_id, page=page, limit=limit)
    )


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Create a new post.

    Requires authentication. The author upvotes their own post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Returns:
        Created post
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await create_post_use_case.execute(
        CreatePostRequest(
            author_id=user_id,
            subreddit_id=request.subreddit_id,
            post_type=request.post_type,
            title=request.title,
            text_submission=request.text_submission,
            link_submission=request.link_submission,
            image_submission=request.image_submission,
        )
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a post with its comment tree."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.patch("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Replace the submission of a post.

    Only the author can update. The submission field matching the post's
    type is used, the others are ignored.

    Args:
        post_id: Post to update
        request: New submission
        update_post_use_case: Update post use case from DI
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Returns:
        Updated post
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=user_id,
            text_submission=request.text_submission,
            link_submission=request.link_submission,
            image_submission=request.image_submission,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a post. Only the author can delete.

    Karma earned by the post is kept.
    """
    user_id = require_user_id(jwt_service, auth_token)

    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id, user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
