"""Subreddit aggregate root.

A community that posts are submitted to.
"""

from datetime import datetime

from pydantic import Field

from threadly.domain.model.common import AggregateRoot, utc_now
from threadly.domain.value import PostId, SubredditId, SubredditName, UserId


class Subreddit(AggregateRoot):
    """Subreddit aggregate root."""

    id: SubredditId
    name: SubredditName
    description: str = Field(default="", max_length=500)
    creator_id: UserId
    posts: list[PostId] = Field(default_factory=list)
    subscribed_by: list[UserId] = Field(default_factory=list)
    subscriber_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
