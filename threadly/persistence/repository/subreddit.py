"""PostgreSQL implementation of Subreddit repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from threadly.domain.model import Subreddit
from threadly.domain.repository import SubredditRepository
from threadly.domain.value import SubredditId, SubredditName
from threadly.persistence.mappers import row_to_subreddit, subreddit_to_dict
from threadly.persistence.tables import subreddits_table

from .versioning import versioned_save


class PostgresSubredditRepository(SubredditRepository):
    """PostgreSQL implementation of SubredditRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        stmt = select(subreddits_table).where(subreddits_table.c.id == subreddit_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_subreddit(dict(row)) if row else None

    async def find_by_name(self, name: SubredditName) -> Optional[Subreddit]:
        """Find a subreddit by name, ignoring case."""
        stmt = select(subreddits_table).where(
            func.lower(subreddits_table.c.name) == name.key
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_subreddit(dict(row)) if row else None

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit (create or update) with an optimistic version check."""
        return await versioned_save(
            self.session, subreddits_table, subreddit, subreddit_to_dict, "Subreddit"
        )
