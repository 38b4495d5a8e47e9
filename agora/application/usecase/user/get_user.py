"""Get user use case."""

from datetime import datetime

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.error import UnknownVoterError
from agora.domain.service import UserService
from agora.domain.value import WalletAddress


class GetUserRequest(BaseModel):
    """Get user request."""

    wallet_address: str


class GetUserResponse(CamelModel):
    """Get user response."""

    user_id: str
    wallet_address: str
    created_at: datetime


class GetUserUseCase(BaseUseCase):
    """Use case for looking up an account by wallet address."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            UnknownVoterError: If no account uses the wallet
        """
        try:
            wallet_address = WalletAddress(request.wallet_address)
        except ValueError:
            raise UnknownVoterError(request.wallet_address)

        user = await self.user_service.get_by_wallet_address(wallet_address)
        return GetUserResponse(
            user_id=str(user.id),
            wallet_address=user.wallet_address.root,
            created_at=user.created_at,
        )
