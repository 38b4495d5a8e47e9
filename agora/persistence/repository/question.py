"""SQL implementation of Question repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Question
from agora.domain.repository import QuestionRepository
from agora.domain.value import QuestionId, Subject
from agora.persistence.mappers import question_to_dict, row_to_question
from agora.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """SQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def find_recent(
        self,
        subject: Optional[Subject] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions ordered newest first."""
        stmt = select(questions_table)
        if subject is not None:
            stmt = stmt.where(questions_table.c.subject == subject.value)
        stmt = (
            stmt.order_by(questions_table.c.created_at.desc(), questions_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question
