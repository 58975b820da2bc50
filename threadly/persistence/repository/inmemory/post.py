"""In-memory post repository for testing."""

from typing import Optional

from threadly.domain.model.post import Post
from threadly.domain.repository.post import PostRepository, PostSortOrder
from threadly.domain.value import PostId, SubredditId

from .store import InMemoryDatabase, versioned_put


def _sort_posts(posts: list[Post], sort: PostSortOrder) -> list[Post]:
    """Order posts like the SQL repository: primary key, then newest, then id."""
    if sort == PostSortOrder.OLD:
        return sorted(posts, key=lambda p: (p.created_at, p.id))
    if sort == PostSortOrder.NEW:
        return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)

    score = {
        PostSortOrder.HOT: lambda p: p.hot_algo,
        PostSortOrder.BEST: lambda p: p.vote_ratio,
        PostSortOrder.TOP: lambda p: p.points_count,
        PostSortOrder.CONTROVERSIAL: lambda p: p.controversial_algo,
    }[sort]
    return sorted(posts, key=lambda p: (score(p), p.created_at, p.id), reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        subreddit_id: Optional[SubredditId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = list(self._db.posts.values())

        # Filter by subreddit
        if subreddit_id is not None:
            posts = [p for p in posts if p.subreddit_id == subreddit_id]

        # Paginate
        return _sort_posts(posts, sort)[offset : offset + limit]

    async def count(self, subreddit_id: Optional[SubredditId] = None) -> int:
        """Count posts matching the given filters."""
        if subreddit_id is None:
            return len(self._db.posts)
        return sum(1 for p in self._db.posts.values() if p.subreddit_id == subreddit_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        return versioned_put(self._db.posts, post, "Post")

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._db.posts.pop(post_id, None) is not None
