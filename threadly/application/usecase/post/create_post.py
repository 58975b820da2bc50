"""Create post use case."""

import logfire
from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import PostView
from threadly.domain.service import PostService
from threadly.domain.value import ImageSubmission, PostType, SubredditId, UserId
from threadly.domain.value.validation import parse_id


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    subreddit_id: str
    post_type: PostType
    title: str
    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: ImageSubmission | None = None


class CreatePostUseCase(BaseUseCase[CreatePostRequest, PostView]):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Resolve the author, then the subreddit
        2. Validate title and the submission matching the post type
        3. Save the post with the author's upvote, then the author and
           subreddit post lists

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If ids are malformed or the content is invalid
            PayloadTooLargeError: If the text submission is too long
            NotFoundError: If the author or subreddit does not exist
        """
        author_id = UserId(parse_id(request.author_id, "user ID"))
        subreddit_id = SubredditId(parse_id(request.subreddit_id, "subreddit ID"))

        with logfire.span(
            "create_post.execute",
            post_type=request.post_type.value,
            subreddit_id=request.subreddit_id,
        ):
            post = await self.post_service.create_post(
                author_id=author_id,
                subreddit_id=subreddit_id,
                post_type=request.post_type,
                title=request.title,
                text_submission=request.text_submission,
                link_submission=request.link_submission,
                image_submission=request.image_submission,
            )
            return PostView.from_model(post)
