"""Repository interfaces for Threadly domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from threadly.domain.repository.post import PostRepository, PostSortOrder
from threadly.domain.repository.subreddit import SubredditRepository
from threadly.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "SubredditRepository",
    "PostRepository",
    "PostSortOrder",
]
