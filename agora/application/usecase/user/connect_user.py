"""Connect user use case."""

from datetime import datetime

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.service import UserService
from agora.domain.value import WalletAddress


class ConnectUserRequest(BaseModel):
    """Connect user request."""

    wallet_address: str


class ConnectUserResponse(CamelModel):
    """Connect user response."""

    user_id: str
    wallet_address: str
    created: bool
    created_at: datetime


class ConnectUserUseCase(BaseUseCase):
    """Use case for connecting a wallet, registering it on first use."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize connect user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ConnectUserRequest) -> ConnectUserResponse:
        """Execute connect user flow.

        Raises:
            ValueError: If the wallet address is malformed
            WalletConflictError: If a concurrent request registered it first
        """
        user, created = await self.user_service.connect(
            WalletAddress(request.wallet_address)
        )
        return ConnectUserResponse(
            user_id=str(user.id),
            wallet_address=user.wallet_address.root,
            created=created,
            created_at=user.created_at,
        )
