"""Post answer use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.error import UnknownVoterError
from agora.domain.model.answer import Answer
from agora.domain.service import AnswerService, QuestionService, UserService
from agora.domain.value import AnswerId, WalletAddress


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    question_id: str
    wallet_address: str
    content: str


class PostAnswerResponse(CamelModel):
    """Post answer response."""

    answer_id: str
    question_id: str
    responder_id: str
    content: str
    created_at: datetime


class PostAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize post answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: PostAnswerRequest) -> PostAnswerResponse:
        """Execute post answer flow.

        Raises:
            UnknownVoterError: If the wallet has no account
            UnknownQuestionError: If the question does not exist
            ValueError: If the content is empty or too long
        """
        try:
            wallet_address = WalletAddress(request.wallet_address)
        except ValueError:
            raise UnknownVoterError(request.wallet_address)
        responder = await self.user_service.get_by_wallet_address(wallet_address)
        question = await self.question_service.get_question(request.question_id)

        with logfire.span(
            "post_answer.execute",
            question_id=str(question.id),
            responder_id=str(responder.id),
        ):
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                responder_id=responder.id,
                content=request.content.strip(),
                created_at=datetime.now(),
            )
            saved = await self.answer_service.save_answer(answer)
            return PostAnswerResponse(
                answer_id=str(saved.id),
                question_id=str(saved.question_id),
                responder_id=str(saved.responder_id),
                content=saved.content,
                created_at=saved.created_at,
            )
