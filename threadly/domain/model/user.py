"""User aggregate root.

Users accumulate karma through votes on their posts and comments.
Credentials are produced by the identity service; only the opaque hash is
kept here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadly.domain.model.common import AggregateRoot, utc_now
from threadly.domain.value import PostId, SubredditId, UserId, Username
from threadly.domain.value.common import ValueObject


class KarmaPoints(ValueObject):
    """Karma split by where it was earned. Either part may go negative."""

    post_karma: int = 0
    comment_karma: int = 0

    @property
    def total(self) -> int:
        return self.post_karma + self.comment_karma


class User(AggregateRoot):
    """User aggregate root."""

    id: UserId
    username: Username
    password_hash: Optional[str] = None
    karma_points: KarmaPoints = Field(default_factory=KarmaPoints)
    posts: list[PostId] = Field(default_factory=list)
    subscribed_subs: list[SubredditId] = Field(default_factory=list)
    total_comments: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def with_karma(self, post_delta: int = 0, comment_delta: int = 0) -> "User":
        """Return a copy with karma adjusted."""
        karma = KarmaPoints(
            post_karma=self.karma_points.post_karma + post_delta,
            comment_karma=self.karma_points.comment_karma + comment_delta,
        )
        return self.model_copy(update={"karma_points": karma})
