"""Shared in-memory storage for testing.

One InMemoryDatabase lives for the whole application so that separate
requests (each with their own repositories) see the same data. Saves run
the same optimistic version check as the SQL store but nothing is rolled
back on errors.
"""

from typing import TypeVar

from threadly.domain.error import ConcurrentUpdateError
from threadly.domain.model import Post, Subreddit, User
from threadly.domain.value import PostId, SubredditId, UserId

T = TypeVar("T", Post, User, Subreddit)


class InMemoryDatabase:
    """Process-wide tables of aggregates keyed by id."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.subreddits: dict[SubredditId, Subreddit] = {}
        self.posts: dict[PostId, Post] = {}


def versioned_put(table: dict, entity: T, resource: str) -> T:
    """Store an aggregate if its version matches the stored one.

    Args:
        table: Table to write to
        entity: Aggregate carrying the version it was loaded with (0 if new)
        resource: Name used in the error message

    Returns:
        The stored aggregate, with its version bumped

    Raises:
        ConcurrentUpdateError: If the stored version differs
    """
    stored = table.get(entity.id)
    stored_version = stored.version if stored is not None else 0
    if stored_version != entity.version:
        raise ConcurrentUpdateError(resource, str(entity.id))

    saved = entity.next_version()
    table[entity.id] = saved
    return saved
