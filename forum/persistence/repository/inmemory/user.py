"""In-memory user repository for testing."""

from typing import Optional

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Store a user, standing in for the authentication service."""
        self._users[user.id] = user
        return user

    async def username_of(self, user_id: Optional[str]) -> Optional[str]:
        """Resolve a username the way the SQL join does, None if unknown."""
        if user_id is None:
            return None
        user = self._users.get(UserId(user_id))
        return user.username if user else None
