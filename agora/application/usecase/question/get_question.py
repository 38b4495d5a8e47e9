"""Get question use case."""

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.application.usecase.question.post_question import QuestionResponse
from agora.domain.service import QuestionService


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str


class GetQuestionUseCase(BaseUseCase):
    """Use case for fetching a single question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> QuestionResponse:
        """Execute get question flow.

        Raises:
            UnknownQuestionError: If the question does not exist
        """
        question = await self.question_service.get_question(request.question_id)
        return QuestionResponse.from_question(question)
