"""Unit tests for the user repository contract.

Users belong to the authentication service; the forum only reads them.
"""

import pytest

from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from forum.persistence.repository import PostgresUserRepository
from forum.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import seed_user


class TestUserRepositoryContract:
    """Tests for the read-only user repository."""

    def test_contract_only_reads(self):
        assert UserRepository.__abstractmethods__ == frozenset({"find_by_id"})
        assert not hasattr(PostgresUserRepository, "save")

    @pytest.mark.asyncio
    async def test_seeded_user_is_found(self):
        """Seeded users resolve by id and username; unknown ids do not."""
        # Arrange
        users = InMemoryUserRepository()
        await seed_user(users, "user-1", "dicoding")

        # Act
        found = await users.find_by_id(UserId("user-1"))

        # Assert
        assert found is not None
        assert found.fullname == "Dicoding"
        assert await users.username_of("user-1") == "dicoding"
        assert await users.find_by_id(UserId("user-2")) is None
        assert await users.username_of(None) is None
