"""Update comment use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import CommentView
from threadly.domain.service import CommentService
from threadly.domain.value import CommentId, PostId, UserId
from threadly.domain.value.validation import parse_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Current user ID (must be author)
    body: str


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, CommentView]):
    """Use case for editing a comment's body."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Args:
            request: Update comment request with IDs and new body

        Returns:
            The comment after the update

        Raises:
            ValidationError: If the body is empty or an id is malformed
            NotFoundError: If the post, user or comment does not exist
            NotAuthorizedError: If user doesn't own the comment
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment ID"))
        post = await self.comment_service.update_comment(
            PostId(parse_id(request.post_id, "post ID")),
            comment_id,
            UserId(parse_id(request.user_id, "user ID")),
            request.body,
        )
        return CommentView.from_model(self.comment_service.get_comment(post, comment_id))
