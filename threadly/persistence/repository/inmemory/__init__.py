"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .store import InMemoryDatabase
from .subreddit import InMemorySubredditRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryPostRepository",
    "InMemorySubredditRepository",
    "InMemoryUserRepository",
]
