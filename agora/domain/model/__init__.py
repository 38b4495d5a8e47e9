"""Domain model entities for Agora."""

from agora.domain.model.answer import Answer
from agora.domain.model.question import Question
from agora.domain.model.user import User
from agora.domain.model.vote import Vote

__all__ = [
    "User",
    "Question",
    "Answer",
    "Vote",
]
