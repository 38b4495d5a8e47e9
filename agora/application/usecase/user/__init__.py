"""User use cases."""

from .connect_user import ConnectUserRequest, ConnectUserResponse, ConnectUserUseCase
from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase

__all__ = [
    "ConnectUserRequest",
    "ConnectUserResponse",
    "ConnectUserUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
]
