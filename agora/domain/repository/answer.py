"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.answer import Answer
from agora.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first.

        Args:
            question_id: The question's unique identifier

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass
