"""Create comment use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import CommentView
from threadly.domain.service import CommentService
from threadly.domain.value import PostId, UserId
from threadly.domain.value.validation import parse_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    body: str


class CommentListResponse(BaseModel):
    """All comments of a post after a change."""

    post_id: str
    comment_count: int
    comments: list[CommentView]


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CommentListResponse]
):
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentListResponse:
        """Execute create comment flow.

        Steps:
        1. Validate the body
        2. Resolve the post, then the author
        3. Append the comment and credit the author

        Args:
            request: Create comment request

        Returns:
            The post's comments, including the new one

        Raises:
            ValidationError: If the body is empty or an id is malformed
            NotFoundError: If the post or the author does not exist
        """
        post = await self.comment_service.add_comment(
            PostId(parse_id(request.post_id, "post ID")),
            UserId(parse_id(request.author_id, "user ID")),
            request.body,
        )
        return CommentListResponse(
            post_id=str(post.id),
            comment_count=post.comment_count,
            comments=[CommentView.from_model(c) for c in post.comments],
        )
