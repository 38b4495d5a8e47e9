"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import AliasChoices, BaseModel, Field

from agora.application.usecase.user import (
    ConnectUserRequest,
    ConnectUserResponse,
    ConnectUserUseCase,
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)
from agora.domain.error import DomainError
from agora.interface.error import invalid_request, to_http_exception

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class ConnectUserAPIRequest(BaseModel):
    """API request for connecting a wallet."""

    wallet_address: str = Field(
        validation_alias=AliasChoices("walletAddress", "wallet_address")
    )


@router.post("", response_model=ConnectUserResponse)
async def connect_user(
    request: ConnectUserAPIRequest,
    connect_user_use_case: FromDishka[ConnectUserUseCase],
) -> ConnectUserResponse:
    """Connect a wallet, creating the account the first time it is seen.

    Example:
        POST /api/users
        {"walletAddress": "0xABC"}

        Response:
        {
            "userId": "123e4567-e89b-12d3-a456-426614174000",
            "walletAddress": "0xABC",
            "created": true,
            "createdAt": "2025-01-15T12:34:56"
        }
    """
    try:
        return await connect_user_use_case.execute(
            ConnectUserRequest(wallet_address=request.wallet_address)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise invalid_request(str(e))


@router.get("/{wallet_address}", response_model=GetUserResponse)
async def get_user(
    wallet_address: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> GetUserResponse:
    """Get an account by wallet address.

    Raises:
        HTTPException: 404 if no account uses the wallet
    """
    try:
        return await get_user_use_case.execute(
            GetUserRequest(wallet_address=wallet_address)
        )
    except DomainError as e:
        raise to_http_exception(e)
