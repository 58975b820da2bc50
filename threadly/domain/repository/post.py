"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from threadly.domain.model.post import Post
from threadly.domain.value import PostId, SubredditId


class PostSortOrder(str, Enum):
    """Sort order for post listings.

    Ties are broken by created_at DESC, then id.
    """

    HOT = "hot"  # hot_algo DESC
    BEST = "best"  # vote_ratio DESC
    TOP = "top"  # points_count DESC
    NEW = "new"  # created_at DESC
    OLD = "old"  # created_at ASC
    CONTROVERSIAL = "controversial"  # controversial_algo DESC


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including its comment tree.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        subreddit_id: Optional[SubredditId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination.

        Args:
            sort: Sort order
            subreddit_id: Filter by subreddit (None for all subreddits)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, subreddit_id: Optional[SubredditId] = None) -> int:
        """Count posts matching the given filters.

        Args:
            subreddit_id: Filter by subreddit (None for all subreddits)

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        A post with version 0 is inserted. Any other post is only written
        if the stored version still equals post.version.

        Args:
            post: The post to save

        Returns:
            The saved post, with its version bumped

        Raises:
            ConcurrentUpdateError: If the stored version differs
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass
