"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import UserId, WalletAddress


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_wallet_address(
        self, wallet_address: WalletAddress
    ) -> Optional[User]:
        """Find a user by their wallet address."""
        for user in self._users.values():
            if user.wallet_address == wallet_address:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a new user.

        Raises:
            IntegrityError: If the wallet address is already registered
        """
        for existing in self._users.values():
            if existing.wallet_address == user.wallet_address:
                raise IntegrityError("Duplicate wallet address", None, Exception())
        self._users[user.id] = user
        return user
