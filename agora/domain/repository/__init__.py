"""Repository interfaces for the Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from agora.domain.repository.answer import AnswerRepository
from agora.domain.repository.question import QuestionRepository
from agora.domain.repository.user import UserRepository
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
]
