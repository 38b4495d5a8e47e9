"""In-memory vote repository for testing."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import AnswerId, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    ``save`` checks and inserts without yielding to the event loop, which
    makes it atomic under asyncio the way the unique constraint is in SQL.
    """

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    @property
    def votes(self) -> list[Vote]:
        """Snapshot of all stored votes."""
        return list(self._votes)

    async def find_by_answer_and_voter(
        self, answer_id: AnswerId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on an answer."""
        for vote in self._votes:
            if vote.answer_id == answer_id and vote.voter_id == voter_id:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        for existing in self._votes:
            if (
                existing.answer_id == vote.answer_id
                and existing.voter_id == vote.voter_id
            ):
                raise IntegrityError(
                    "INSERT INTO votes",
                    None,
                    Exception(
                        "UNIQUE constraint failed: votes.answer_id, votes.voter_id"
                    ),
                )

        self._votes.append(vote)
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                self._votes.pop(i)
                return True
        return False

    async def count_by_answer(self, answer_id: AnswerId) -> int:
        """Count votes on an answer."""
        return sum(1 for v in self._votes if v.answer_id == answer_id)

    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, int]:
        """Count votes on several answers."""
        return {
            aid: sum(1 for v in self._votes if v.answer_id == aid) for aid in answer_ids
        }

    async def find_by_voter_and_answers(
        self, voter_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        wanted = set(answer_ids)
        return [
            v for v in self._votes if v.voter_id == voter_id and v.answer_id in wanted
        ]
