"""List questions use case."""

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.application.usecase.question.post_question import QuestionResponse
from agora.domain.service import QuestionService
from agora.domain.value import Subject


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    subject: Subject | None = None
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListQuestionsResponse(CamelModel):
    """List questions response."""

    questions: list[QuestionResponse]
    limit: int
    offset: int


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing questions, newest first."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow."""
        with logfire.span(
            "list_questions.execute",
            subject=request.subject.value if request.subject else None,
            limit=request.limit,
            offset=request.offset,
        ):
            questions = await self.question_service.list_questions(
                subject=request.subject, limit=request.limit, offset=request.offset
            )
            return ListQuestionsResponse(
                questions=[QuestionResponse.from_question(q) for q in questions],
                limit=request.limit,
                offset=request.offset,
            )
