"""PostgreSQL repository implementations."""

from threadly.persistence.repository.post import PostgresPostRepository
from threadly.persistence.repository.subreddit import PostgresSubredditRepository
from threadly.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSubredditRepository",
    "PostgresPostRepository",
]
