"""Delete reply use case."""

from pydantic import BaseModel

from threadly.application.usecase.base import BaseUseCase
from threadly.domain.service import CommentService
from threadly.domain.value import CommentId, PostId, ReplyId, UserId
from threadly.domain.value.validation import parse_id


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    post_id: str
    comment_id: str
    reply_id: str
    user_id: str  # Current user ID (must be author)


class DeleteReplyUseCase(BaseUseCase[DeleteReplyRequest, None]):
    """Use case for deleting a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteReplyRequest) -> None:
        """Execute delete reply flow.

        Raises:
            NotFoundError: If the post, user, comment or reply does not exist
            NotAuthorizedError: If user doesn't own the reply
        """
        await self.comment_service.delete_reply(
            PostId(parse_id(request.post_id, "post ID")),
            CommentId(parse_id(request.comment_id, "comment ID")),
            ReplyId(parse_id(request.reply_id, "reply ID")),
            UserId(parse_id(request.user_id, "user ID")),
        )
