"""Subreddit domain service."""

from uuid import uuid4

import logfire

from threadly.domain.error import ConflictError, NotFoundError
from threadly.domain.model import Subreddit
from threadly.domain.model.common import utc_now
from threadly.domain.repository import SubredditRepository
from threadly.domain.value import SubredditId, SubredditName, UserId

from .base import Service


class SubredditService(Service):
    """Domain service for subreddit operations."""

    def __init__(self, subreddit_repository: SubredditRepository) -> None:
        """Initialize subreddit service.

        Args:
            subreddit_repository: Subreddit repository
        """
        self.subreddit_repository = subreddit_repository

    async def get_by_id(self, subreddit_id: SubredditId) -> Subreddit:
        """Get subreddit by ID.

        Args:
            subreddit_id: Subreddit ID

        Returns:
            Subreddit entity

        Raises:
            NotFoundError: If subreddit not found
        """
        with logfire.span("subreddit_service.get_by_id", subreddit_id=str(subreddit_id)):
            subreddit = await self.subreddit_repository.find_by_id(subreddit_id)
            if not subreddit:
                logfire.warn("Subreddit not found", subreddit_id=str(subreddit_id))
                raise NotFoundError(
                    "Subreddit",
                    str(subreddit_id),
                    message=f"Subreddit with ID: '{subreddit_id}' does not exist in database.",
                )
            return subreddit

    async def create_subreddit(
        self, name: SubredditName, creator_id: UserId, description: str = ""
    ) -> Subreddit:
        """Create a subreddit.

        Args:
            name: Subreddit name
            creator_id: User creating the subreddit
            description: Free-form description

        Returns:
            The saved subreddit

        Raises:
            ConflictError: If the name is taken, ignoring case
        """
        with logfire.span("subreddit_service.create_subreddit", name=name.root):
            if await self.subreddit_repository.find_by_name(name):
                logfire.warn("Subreddit name already taken", name=name.root)
                raise ConflictError("Subreddit", "name", name.root)

            now = utc_now()
            subreddit = Subreddit(
                id=SubredditId(uuid4()),
                name=name,
                description=description,
                creator_id=creator_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.subreddit_repository.save(subreddit)
            logfire.info(
                "Subreddit created", subreddit_id=str(saved.id), name=name.root
            )
            return saved

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save subreddit (create or update).

        Args:
            subreddit: Subreddit to save

        Returns:
            Saved subreddit
        """
        with logfire.span("subreddit_service.save", subreddit_id=str(subreddit.id)):
            saved = await self.subreddit_repository.save(subreddit)
            logfire.info(
                "Subreddit saved", subreddit_id=str(saved.id), version=saved.version
            )
            return saved
