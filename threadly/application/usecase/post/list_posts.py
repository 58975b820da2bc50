"""List posts use case."""

import logfire
from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import PostView
from threadly.domain.repository import PostSortOrder
from threadly.domain.service import PostService
from threadly.domain.value import SubredditId
from threadly.domain.value.validation import parse_id


class ListPostsRequest(BaseModel):
    """List posts request.

    page and limit arrive as raw query strings; anything that is not a
    number falls back to the defaults.
    """

    sort: PostSortOrder = PostSortOrder.HOT
    subreddit_id: str | None = None
    page: str | None = None
    limit: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]
    total: int
    page: int
    limit: int
    next: int | None
    previous: int | None


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing posts with sorting, filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with sort, filter and pagination

        Returns:
            One page of posts, without their comment trees
        """
        subreddit_id = (
            SubredditId(parse_id(request.subreddit_id, "subreddit ID"))
            if request.subreddit_id
            else None
        )

        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            subreddit_id=request.subreddit_id,
        ):
            page = await self.post_service.list_posts(
                sort=request.sort,
                subreddit_id=subreddit_id,
                page=_to_int(request.page) or 1,
                limit=_to_int(request.limit),
            )

            return ListPostsResponse(
                posts=[PostView.from_model(p, include_comments=False) for p in page.posts],
                total=page.total,
                page=page.page,
                limit=page.limit,
                next=page.next,
                previous=page.previous,
            )
