"""SQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import AnswerId, UserId, VoteId
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """SQL implementation of VoteRepository.

    Uniqueness of (answer_id, voter_id) is left to the database constraint
    so a duplicate insert fails atomically with IntegrityError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_answer_and_voter(
        self, answer_id: AnswerId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on an answer."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.answer_id == answer_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        On a constraint violation the transaction is rolled back before
        re-raising so the request session can still be committed cleanly.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_answer(self, answer_id: AnswerId) -> int:
        """Count votes on an answer."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.answer_id == answer_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, int]:
        """Count votes on several answers in one query."""
        if not answer_ids:
            return {}

        stmt = (
            select(votes_table.c.answer_id, func.count())
            .where(votes_table.c.answer_id.in_(answer_ids))
            .group_by(votes_table.c.answer_id)
        )
        result = await self.session.execute(stmt)
        counts = {AnswerId(answer_id): count for answer_id, count in result.all()}
        return {aid: counts.get(aid, 0) for aid in answer_ids}

    async def find_by_voter_and_answers(
        self, voter_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.answer_id.in_(answer_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]
