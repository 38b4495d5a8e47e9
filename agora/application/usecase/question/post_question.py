"""Post question use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.error import UnknownVoterError
from agora.domain.model.question import Question
from agora.domain.service import QuestionService, UserService
from agora.domain.value import QuestionId, Subject, WalletAddress


class PostQuestionRequest(BaseModel):
    """Post question request."""

    wallet_address: str
    content: str
    subject: Subject


class QuestionResponse(CamelModel):
    """A question as returned to clients."""

    question_id: str
    asker_id: str
    subject: Subject
    content: str
    created_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            question_id=str(question.id),
            asker_id=str(question.asker_id),
            subject=question.subject,
            content=question.content,
            created_at=question.created_at,
        )


class PostQuestionUseCase(BaseUseCase):
    """Use case for posting a question to the community."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize post question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: PostQuestionRequest) -> QuestionResponse:
        """Execute post question flow.

        Steps:
        1. Resolve the asker from their wallet address
        2. Create Question entity (validation happens in domain model)
        3. Save question

        Raises:
            UnknownVoterError: If the wallet has no account
            ValueError: If the content is empty or too long
        """
        try:
            wallet_address = WalletAddress(request.wallet_address)
        except ValueError:
            raise UnknownVoterError(request.wallet_address)
        asker = await self.user_service.get_by_wallet_address(wallet_address)

        with logfire.span(
            "post_question.execute",
            subject=request.subject.value,
            asker_id=str(asker.id),
        ):
            question = Question(
                id=QuestionId(uuid4()),
                asker_id=asker.id,
                subject=request.subject,
                content=request.content.strip(),
                created_at=datetime.now(),
            )
            saved = await self.question_service.save_question(question)
            logfire.info("Question posted", question_id=str(saved.id))
            return QuestionResponse.from_question(saved)
