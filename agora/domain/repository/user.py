"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.user import User
from agora.domain.value import UserId, WalletAddress


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
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

    @abstractmethod
    async def find_by_wallet_address(
        self, wallet_address: WalletAddress
    ) -> Optional[User]:
        """Find a user by their wallet address.

        Args:
            wallet_address: The wallet the user connected with

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a new user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the wallet address is already registered
        """
        pass
