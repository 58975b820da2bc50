"""In-memory user repository for testing."""

from typing import Optional

from threadly.domain.model.user import User
from threadly.domain.repository.user import UserRepository
from threadly.domain.value import UserId, Username

from .store import InMemoryDatabase, versioned_put


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        for user in self._db.users.values():
            if user.username.key == username.key:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        return versioned_put(self._db.users, user, "User")
