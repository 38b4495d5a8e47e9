"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.question import Question
from agora.domain.value import QuestionId, Subject


class QuestionRepository(ABC):
    """Repository for Question entity."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        subject: Optional[Subject] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions ordered newest first.

        Args:
            subject: Only return questions filed under this subject
            limit: Maximum number of questions
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass
