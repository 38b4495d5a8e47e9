"""Question domain service."""

from uuid import UUID

import logfire

from agora.domain.error import UnknownQuestionError
from agora.domain.model.question import Question
from agora.domain.repository import QuestionRepository
from agora.domain.value import QuestionId, Subject

from .base import Service, store_faults


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def save_question(self, question: Question) -> Question:
        """Save a question.

        Args:
            question: Question to save

        Returns:
            Saved question
        """
        with logfire.span(
            "question_service.save_question",
            question_id=str(question.id),
            subject=question.subject.value,
        ):
            with store_faults("insert_question"):
                saved = await self.question_repository.save(question)
            logfire.info("Question saved", question_id=str(saved.id))
            return saved

    async def get_question(self, question_id: str) -> Question:
        """Get a question by its string ID.

        Args:
            question_id: Question UUID as string

        Returns:
            Question

        Raises:
            UnknownQuestionError: If the ID is malformed or no question has it
        """
        with logfire.span("question_service.get_question", question_id=question_id):
            try:
                parsed = QuestionId(UUID(question_id))
            except ValueError:
                logfire.warn("Malformed question id", question_id=question_id)
                raise UnknownQuestionError(question_id)

            with store_faults("find_question"):
                question = await self.question_repository.find_by_id(parsed)

            if not question:
                logfire.warn("Question not found", question_id=question_id)
                raise UnknownQuestionError(question_id)
            return question

    async def list_questions(
        self, subject: Subject | None, limit: int, offset: int
    ) -> list[Question]:
        """List questions newest first."""
        with store_faults("list_questions"):
            return await self.question_repository.find_recent(
                subject=subject, limit=limit, offset=offset
            )
