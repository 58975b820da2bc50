"""Update post use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import PostView
from threadly.domain.service import PostService
from threadly.domain.value import ImageSubmission, PostId, UserId
from threadly.domain.value.validation import parse_id


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only the submission matching the post's type is used.
    """

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: ImageSubmission | None = None


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, PostView]):
    """Use case for replacing a post's submission."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, user ID and new submission

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If the new submission is invalid
        """
        post_id = PostId(parse_id(request.post_id, "post ID"))
        user_id = UserId(parse_id(request.user_id, "user ID"))

        post = await self.post_service.update_post(
            post_id,
            user_id,
            text_submission=request.text_submission,
            link_submission=request.link_submission,
            image_submission=request.image_submission,
        )
        return PostView.from_model(post)
