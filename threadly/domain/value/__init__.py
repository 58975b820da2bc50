"""Domain value objects for Threadly."""

from threadly.domain.value.identifiers import (
    CommentId,
    PostId,
    ReplyId,
    SubredditId,
    UserId,
)
from threadly.domain.value.types import (
    ImageSubmission,
    PostType,
    SubredditName,
    Username,
    VotableType,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "SubredditId",
    "PostId",
    "CommentId",
    "ReplyId",
    # Types
    "ImageSubmission",
    "PostType",
    "SubredditName",
    "Username",
    "VotableType",
    "VoteDirection",
]
