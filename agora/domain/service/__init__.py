"""Domain services."""

from .answer_service import AnswerService
from .base import Service, store_faults
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "QuestionService",
    "Service",
    "UserService",
    "VoteService",
    "store_faults",
]
