"""Domain value objects for Agora."""

from agora.domain.value.identifiers import AnswerId, QuestionId, UserId, VoteId
from agora.domain.value.types import Subject, WalletAddress

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "Subject",
    "WalletAddress",
]
