"""User domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import UnknownVoterError, WalletConflictError
from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId, WalletAddress

from .base import Service, store_faults


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def find_by_wallet_address(
        self, wallet_address: WalletAddress
    ) -> User | None:
        """Find user by wallet address.

        Args:
            wallet_address: Wallet the user connected with

        Returns:
            User if found, None otherwise
        """
        with store_faults("find_user_by_wallet"):
            return await self.user_repository.find_by_wallet_address(wallet_address)

    async def get_by_wallet_address(self, wallet_address: WalletAddress) -> User:
        """Get user by wallet address.

        Args:
            wallet_address: Wallet the user connected with

        Returns:
            User entity

        Raises:
            UnknownVoterError: If no user connected with this wallet
        """
        with logfire.span(
            "user_service.get_by_wallet_address", wallet_address=wallet_address.root
        ):
            user = await self.find_by_wallet_address(wallet_address)
            if not user:
                logfire.warn("User not found", wallet_address=wallet_address.root)
                raise UnknownVoterError(wallet_address.root)
            logfire.info(
                "User found", wallet_address=wallet_address.root, user_id=str(user.id)
            )
            return user

    async def connect(self, wallet_address: WalletAddress) -> tuple[User, bool]:
        """Get the user for a wallet, creating the account on first connect.

        Args:
            wallet_address: Wallet the user connected with

        Returns:
            Tuple of (user, created) where created is True for a new account

        Raises:
            WalletConflictError: If the insert hit the unique wallet constraint
                but the conflicting account still cannot be read
        """
        with logfire.span("user_service.connect", wallet_address=wallet_address.root):
            existing = await self.find_by_wallet_address(wallet_address)
            if existing:
                return existing, False

            user = User(id=UserId(uuid4()), wallet_address=wallet_address)
            try:
                with store_faults("insert_user"):
                    saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn(
                    "Concurrent wallet registration",
                    wallet_address=wallet_address.root,
                )
                # The other request won; its row is the account
                winner = await self.find_by_wallet_address(wallet_address)
                if winner is None:
                    raise WalletConflictError(wallet_address.root)
                return winner, False

            logfire.info(
                "User created", user_id=str(saved.id), wallet_address=wallet_address.root
            )
            return saved, True
