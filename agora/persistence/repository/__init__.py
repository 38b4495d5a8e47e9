"""SQL repository implementations."""

from agora.persistence.repository.answer import PostgresAnswerRepository
from agora.persistence.repository.question import PostgresQuestionRepository
from agora.persistence.repository.user import PostgresUserRepository
from agora.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
]
