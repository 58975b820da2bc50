"""Cast vote use case."""

from pydantic import BaseModel, model_validator

from threadly.application.usecase.base import BaseUseCase
from threadly.domain.service import VoteService
from threadly.domain.value import (
    PostId,
    UserId,
    VotableType,
    VoteDirection,
)
from threadly.domain.value.validation import parse_id


class CastVoteRequest(BaseModel):
    """Cast vote request.

    comment_id is required for comment and reply votes, reply_id for reply
    votes.
    """

    votable_type: VotableType
    direction: VoteDirection
    post_id: str
    comment_id: str | None = None
    reply_id: str | None = None
    user_id: str  # User ID from authenticated user

    @model_validator(mode="after")
    def validate_target(self) -> "CastVoteRequest":
        if self.votable_type is not VotableType.POST and not self.comment_id:
            raise ValueError("comment_id is required for comment and reply votes")
        if self.votable_type is VotableType.REPLY and not self.reply_id:
            raise ValueError("reply_id is required for reply votes")
        return self


class CastVoteUseCase(BaseUseCase[CastVoteRequest, None]):
    """Use case for toggling an up/down vote on a post, comment or reply."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> None:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Raises:
            ValidationError: If an id is malformed. Comment and reply ids are
                checked only after the post and voter are found
            NotFoundError: If the target or one of the users is missing
        """
        post_id = PostId(parse_id(request.post_id, "post ID"))
        user_id = UserId(parse_id(request.user_id, "user ID"))

        if request.votable_type is VotableType.POST:
            await self.vote_service.vote_post(post_id, user_id, request.direction)
        elif request.votable_type is VotableType.COMMENT:
            await self.vote_service.vote_comment(
                post_id, request.comment_id, user_id, request.direction
            )
        else:  # VotableType.REPLY
            await self.vote_service.vote_reply(
                post_id, request.comment_id, request.reply_id, user_id, request.direction
            )
