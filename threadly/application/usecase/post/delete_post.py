"""Delete post use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.domain.service import PostService
from threadly.domain.value import PostId, UserId
from threadly.domain.value.validation import parse_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostUseCase(BaseUseCase[DeletePostRequest, None]):
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Delete the post and unlink it from its author and subreddit.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If user doesn't own the post
        """
        await self.post_service.delete_post(
            PostId(parse_id(request.post_id, "post ID")),
            UserId(parse_id(request.user_id, "user ID")),
        )
