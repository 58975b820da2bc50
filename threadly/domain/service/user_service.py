"""User domain service."""

from uuid import uuid4

import logfire

from threadly.domain.error import ConflictError, NotFoundError
from threadly.domain.model import User
from threadly.domain.model.common import utc_now
from threadly.domain.repository import UserRepository
from threadly.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId, not_found_message: str | None = None) -> User:
        """Get user by ID.

        Args:
            user_id: User ID
            not_found_message: Message for the error raised when the user is
                missing, defaults to "User does not exist in database."

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", message=not_found_message)
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    async def create_user(self, username: Username, password_hash: str | None = None) -> User:
        """Register a new user.

        Args:
            username: Desired username
            password_hash: Hash produced by the identity service

        Returns:
            The saved user

        Raises:
            ConflictError: If the username is taken, ignoring case
        """
        with logfire.span("user_service.create_user", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise ConflictError("User", "username", username.root)

            now = utc_now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), username=username.root)
            return saved

    async def apply_post_karma(self, user: User, delta: int) -> User:
        """Adjust a user's post karma and persist.

        Args:
            user: Loaded user
            delta: Karma change, typically +1 or -1

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.apply_post_karma", user_id=str(user.id), delta=delta
        ):
            saved = await self.user_repository.save(user.with_karma(post_delta=delta))
            logfire.info(
                "Post karma changed",
                user_id=str(user.id),
                post_karma=saved.karma_points.post_karma,
            )
            return saved

    async def apply_comment_karma(self, user: User, delta: int) -> User:
        """Adjust a user's comment karma and persist.

        Args:
            user: Loaded user
            delta: Karma change, typically +1 or -1

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.apply_comment_karma", user_id=str(user.id), delta=delta
        ):
            saved = await self.user_repository.save(user.with_karma(comment_delta=delta))
            logfire.info(
                "Comment karma changed",
                user_id=str(user.id),
                comment_karma=saved.karma_points.comment_karma,
            )
            return saved

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id), version=saved.version)
            return saved
