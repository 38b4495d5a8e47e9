"""Unit tests for the user use cases."""

import pytest
from pydantic import ValidationError

from agora.application.usecase.user import (
    ConnectUserRequest,
    ConnectUserUseCase,
    GetUserRequest,
    GetUserUseCase,
)
from agora.domain.error import UnknownVoterError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserUseCases:
    """Tests for ConnectUserUseCase and GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_connect_then_get(self, unit_env):
        connect = await unit_env.get(ConnectUserUseCase)
        get_user = await unit_env.get(GetUserUseCase)

        connected = await connect.execute(ConnectUserRequest(wallet_address="0xABC"))
        fetched = await get_user.execute(GetUserRequest(wallet_address="0xABC"))

        assert connected.created is True
        assert fetched.user_id == connected.user_id
        assert set(fetched.model_dump(by_alias=True)) == {
            "userId",
            "walletAddress",
            "createdAt",
        }

    @pytest.mark.asyncio
    async def test_connect_blank_wallet_is_rejected(self, unit_env):
        connect = await unit_env.get(ConnectUserUseCase)

        with pytest.raises(ValidationError):
            await connect.execute(ConnectUserRequest(wallet_address="   "))

    @pytest.mark.asyncio
    async def test_get_unknown_wallet(self, unit_env):
        get_user = await unit_env.get(GetUserUseCase)

        with pytest.raises(UnknownVoterError):
            await get_user.execute(GetUserRequest(wallet_address="0x999"))
