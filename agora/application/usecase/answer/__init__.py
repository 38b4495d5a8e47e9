"""Answer use cases."""

from .list_answers import (
    AnswerListItem,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from .post_answer import PostAnswerRequest, PostAnswerResponse, PostAnswerUseCase

__all__ = [
    "AnswerListItem",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "PostAnswerRequest",
    "PostAnswerResponse",
    "PostAnswerUseCase",
]
