"""Answer domain service."""

from uuid import UUID

import logfire

from agora.domain.model.answer import Answer
from agora.domain.repository import AnswerRepository
from agora.domain.value import AnswerId, QuestionId

from .base import Service, store_faults


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def save_answer(self, answer: Answer) -> Answer:
        """Save an answer.

        Args:
            answer: Answer to save

        Returns:
            Saved answer
        """
        with logfire.span(
            "answer_service.save_answer",
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
        ):
            with store_faults("insert_answer"):
                saved = await self.answer_repository.save(answer)
            logfire.info("Answer saved", answer_id=str(saved.id))
            return saved

    async def find_answer(self, answer_id: str) -> Answer | None:
        """Find an answer by its string ID.

        A malformed ID cannot name an answer, so it is reported as missing.

        Args:
            answer_id: Answer UUID as string

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.find_answer", answer_id=answer_id):
            try:
                parsed = AnswerId(UUID(answer_id))
            except ValueError:
                logfire.warn("Malformed answer id", answer_id=answer_id)
                return None

            with store_faults("find_answer"):
                answer = await self.answer_repository.find_by_id(parsed)

            if answer:
                logfire.info(
                    "Answer found",
                    answer_id=answer_id,
                    responder_id=str(answer.responder_id),
                )
            else:
                logfire.warn("Answer not found", answer_id=answer_id)
            return answer

    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        """List answers to a question, oldest first."""
        with store_faults("list_answers"):
            return await self.answer_repository.find_by_question(question_id)
