"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from threadly.domain.model import Post
from threadly.domain.repository.post import PostRepository, PostSortOrder
from threadly.domain.value import PostId, SubredditId
from threadly.persistence.mappers import post_to_dict, row_to_post
from threadly.persistence.tables import posts_table

from .versioning import versioned_save

# Primary sort column per order; ties fall back to newest first, then id
_SORT_COLUMNS = {
    PostSortOrder.HOT: desc(posts_table.c.hot_algo),
    PostSortOrder.BEST: desc(posts_table.c.vote_ratio),
    PostSortOrder.TOP: desc(posts_table.c.points_count),
    PostSortOrder.CONTROVERSIAL: desc(posts_table.c.controversial_algo),
}


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(dict(row))

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.HOT,
        subreddit_id: Optional[SubredditId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            subreddit_id=str(subreddit_id) if subreddit_id else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if subreddit_id:
                stmt = stmt.where(posts_table.c.subreddit_id == subreddit_id)

            if sort == PostSortOrder.OLD:
                stmt = stmt.order_by(asc(posts_table.c.created_at), asc(posts_table.c.id))
            elif sort == PostSortOrder.NEW:
                stmt = stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            else:
                stmt = stmt.order_by(
                    _SORT_COLUMNS[sort],
                    desc(posts_table.c.created_at),
                    desc(posts_table.c.id),
                )

            # Pagination
            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(dict(row)) for row in result.mappings().all()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, subreddit_id: Optional[SubredditId] = None) -> int:
        """Count posts matching the given filters."""
        with logfire.span(
            "post_repository.count",
            subreddit_id=str(subreddit_id) if subreddit_id else None,
        ):
            stmt = select(func.count()).select_from(posts_table)

            if subreddit_id:
                stmt = stmt.where(posts_table.c.subreddit_id == subreddit_id)

            result = await self.session.execute(stmt)
            count = result.scalar() or 0
            logfire.info("Post count", count=count)
            return count

    async def save(self, post: Post) -> Post:
        """Save a post (create or update) with an optimistic version check."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            version=post.version,
        ):
            saved = await versioned_save(
                self.session, posts_table, post, post_to_dict, "Post"
            )
            logfire.info("Post saved", post_id=str(post.id), version=saved.version)
            return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
