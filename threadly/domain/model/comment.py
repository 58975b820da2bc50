"""Comment and reply entities.

Comments live inside their post document. Each comment holds an ordered
list of replies; replies cannot be replied to, so the tree is exactly two
levels deep below the post.
"""

from datetime import datetime

from pydantic import Field

from threadly.domain.model.common import utc_now
from threadly.domain.model.vote import Votable
from threadly.domain.value import CommentId, ReplyId, UserId


class Reply(Votable):
    """Reply to a top-level comment."""

    id: ReplyId
    author_id: UserId
    author_username: str
    body: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Comment(Votable):
    """Top-level comment on a post.

    Replies are kept in creation order and addressed by id.
    """

    id: CommentId
    author_id: UserId
    author_username: str
    body: str = Field(min_length=1)
    replies: list[Reply] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def find_reply(self, reply_id: ReplyId) -> Reply | None:
        """Find a reply by id (linear scan)."""
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        return None

    def with_reply(self, reply: Reply) -> "Comment":
        """Return a copy with the reply appended, or replaced if its id exists."""
        if self.find_reply(reply.id) is None:
            replies = [*self.replies, reply]
        else:
            replies = [reply if r.id == reply.id else r for r in self.replies]
        return self.model_copy(update={"replies": replies})

    def without_reply(self, reply_id: ReplyId) -> "Comment":
        """Return a copy with the reply removed."""
        return self.model_copy(
            update={"replies": [r for r in self.replies if r.id != reply_id]}
        )
