"""In-memory subreddit repository for testing."""

from typing import Optional

from threadly.domain.model.subreddit import Subreddit
from threadly.domain.repository.subreddit import SubredditRepository
from threadly.domain.value import SubredditId, SubredditName

from .store import InMemoryDatabase, versioned_put


class InMemorySubredditRepository(SubredditRepository):
    """In-memory implementation of SubredditRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        return self._db.subreddits.get(subreddit_id)

    async def find_by_name(self, name: SubredditName) -> Optional[Subreddit]:
        """Find a subreddit by name, ignoring case."""
        for subreddit in self._db.subreddits.values():
            if subreddit.name.key == name.key:
                return subreddit
        return None

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save or update a subreddit."""
        return versioned_put(self._db.subreddits, subreddit, "Subreddit")
