"""List answers use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.service import (
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
)
from agora.domain.model import User
from agora.domain.value import WalletAddress


class AnswerListItem(CamelModel):
    """Answer list item in response."""

    answer_id: str
    responder_id: str
    content: str
    created_at: datetime
    vote_count: int
    has_voted: bool


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    wallet_address: str | None = None  # Viewer, for has_voted flags


class ListAnswersResponse(CamelModel):
    """List answers response."""

    question_id: str
    answers: list[AnswerListItem]


class ListAnswersUseCase(BaseUseCase):
    """Use case for listing a question's answers with their votes."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def _find_viewer(self, wallet_address: str) -> User | None:
        try:
            address = WalletAddress(wallet_address)
        except ValueError:
            # Malformed, so no account can own it
            logfire.warn("Malformed viewer wallet", wallet_address=wallet_address)
            return None
        return await self.user_service.find_by_wallet_address(address)

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Vote counts are computed from vote rows. An unknown viewer wallet
        is not an error; every answer is then reported as not voted.

        Raises:
            UnknownQuestionError: If the question does not exist
        """
        question = await self.question_service.get_question(request.question_id)

        with logfire.span("list_answers.execute", question_id=str(question.id)):
            answers = await self.answer_service.list_answers(question.id)
            answer_ids = [a.id for a in answers]

            counts = await self.vote_service.count_votes_for_answers(answer_ids)

            voted: dict = {}
            if request.wallet_address and request.wallet_address.strip():
                viewer = await self._find_viewer(request.wallet_address)
                if viewer:
                    voted = await self.vote_service.get_user_votes_for_answers(
                        viewer.id, answer_ids
                    )

            return ListAnswersResponse(
                question_id=str(question.id),
                answers=[
                    AnswerListItem(
                        answer_id=str(a.id),
                        responder_id=str(a.responder_id),
                        content=a.content,
                        created_at=a.created_at,
                        vote_count=counts.get(a.id, 0),
                        has_voted=voted.get(a.id, False),
                    )
                    for a in answers
                ],
            )
