"""Subreddit repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threadly.domain.model.subreddit import Subreddit
from threadly.domain.value import SubredditId, SubredditName


class SubredditRepository(ABC):
    """Repository for Subreddit aggregate."""

    @abstractmethod
    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID.

        Args:
            subreddit_id: The subreddit's unique identifier

        Returns:
            The subreddit if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: SubredditName) -> Optional[Subreddit]:
        """Find a subreddit by name, ignoring case.

        Args:
            name: The subreddit name

        Returns:
            The subreddit if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit (create or update).

        Args:
            subreddit: The subreddit to save

        Returns:
            The saved subreddit, with its version bumped

        Raises:
            ConcurrentUpdateError: If the stored version differs
        """
        pass
