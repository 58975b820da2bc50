"""Delete comment use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.domain.service import CommentService
from threadly.domain.value import CommentId, PostId, UserId
from threadly.domain.value.validation import parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Current user ID (must be author)


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, None]):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the post, user or comment does not exist
            NotAuthorizedError: If user doesn't own the comment
        """
        await self.comment_service.delete_comment(
            PostId(parse_id(request.post_id, "post ID")),
            CommentId(parse_id(request.comment_id, "comment ID")),
            UserId(parse_id(request.user_id, "user ID")),
        )
