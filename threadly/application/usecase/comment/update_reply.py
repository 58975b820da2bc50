"""Update reply use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.application.usecase.views import ReplyView
from threadly.domain.service import CommentService
from threadly.domain.value import CommentId, PostId, ReplyId, UserId
from threadly.domain.value.validation import parse_id


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    post_id: str
    comment_id: str
    reply_id: str
    user_id: str  # Current user ID (must be author)
    body: str


class UpdateReplyUseCase(BaseUseCase[UpdateReplyRequest, ReplyView]):
    """Use case for editing a reply's body."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateReplyRequest) -> ReplyView:
        """Execute update reply flow.

        Returns:
            The reply after the update

        Raises:
            ValidationError: If the body is empty or an id is malformed
            NotFoundError: If the post, user, comment or reply does not exist
            NotAuthorizedError: If user doesn't own the reply
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment ID"))
        reply_id = ReplyId(parse_id(request.reply_id, "reply ID"))
        post = await self.comment_service.update_reply(
            PostId(parse_id(request.post_id, "post ID")),
            comment_id,
            reply_id,
            UserId(parse_id(request.user_id, "user ID")),
            request.body,
        )
        comment = self.comment_service.get_comment(post, comment_id)
        return ReplyView.from_model(self.comment_service.get_reply(comment, reply_id))
