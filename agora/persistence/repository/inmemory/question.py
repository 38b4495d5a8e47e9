"""In-memory question repository for testing."""

from typing import List, Optional

from agora.domain.model.question import Question
from agora.domain.repository.question import QuestionRepository
from agora.domain.value import QuestionId, Subject


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_recent(
        self,
        subject: Optional[Subject] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions ordered newest first."""
        questions = [
            q
            for q in self._questions.values()
            if subject is None or q.subject == subject
        ]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question
