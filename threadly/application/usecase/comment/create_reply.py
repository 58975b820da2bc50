"""Create reply use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import CommentView
from threadly.domain.service import CommentService
from threadly.domain.value import CommentId, PostId, UserId
from threadly.domain.value.validation import parse_id

from .create_comment import CommentListResponse


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    post_id: str
    comment_id: str  # Comment being replied to
    author_id: str  # User ID from authenticated user
    body: str


class CreateReplyUseCase(
    BaseUseCase[CreateReplyRequest, CommentListResponse]
):
    """Use case for replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateReplyRequest) -> CommentListResponse:
        """Execute create reply flow.

        Args:
            request: Create reply request

        Returns:
            The post's comments, including the new reply

        Raises:
            ValidationError: If the body is empty or an id is malformed
            NotFoundError: If the post, author or comment does not exist
        """
        post = await self.comment_service.add_reply(
            PostId(parse_id(request.post_id, "post ID")),
            CommentId(parse_id(request.comment_id, "comment ID")),
            UserId(parse_id(request.author_id, "user ID")),
            request.body,
        )
        return CommentListResponse(
            post_id=str(post.id),
            comment_count=post.comment_count,
            comments=[CommentView.from_model(c) for c in post.comments],
        )
