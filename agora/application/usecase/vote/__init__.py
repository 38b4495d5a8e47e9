"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_count import (
    GetVoteCountRequest,
    GetVoteCountResponse,
    GetVoteCountUseCase,
)
from .retract_vote import RetractVoteRequest, RetractVoteResponse, RetractVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteCountRequest",
    "GetVoteCountResponse",
    "GetVoteCountUseCase",
    "RetractVoteRequest",
    "RetractVoteResponse",
    "RetractVoteUseCase",
]
