"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.user import User
from forum.domain.value import UserId


class UserRepository(ABC):
    """Read access to users owned by the authentication service.

    The forum never creates or updates users; it only reads them to resolve
    usernames for display.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass
