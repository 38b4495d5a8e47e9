"""Question use cases."""

from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .post_question import PostQuestionRequest, PostQuestionUseCase, QuestionResponse

__all__ = [
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "PostQuestionRequest",
    "PostQuestionUseCase",
    "QuestionResponse",
]
