"""SQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId, WalletAddress
from agora.persistence.mappers import row_to_user, user_to_dict
from agora.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """SQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_wallet_address(
        self, wallet_address: WalletAddress
    ) -> Optional[User]:
        """Find a user by their wallet address.

        Args:
            wallet_address: Wallet address to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(
            users_table.c.wallet_address == wallet_address.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If the wallet address is already registered
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise
        return user
