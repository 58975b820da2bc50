"""Get post use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import PostView
from threadly.domain.service import PostService
from threadly.domain.value import PostId
from threadly.domain.value.validation import parse_id


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase[GetPostRequest, PostView]):
    """Use case for retrieving a post with its comment tree."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "post ID"))
        post = await self.post_service.get_post_by_id(post_id)
        return PostView.from_model(post)
