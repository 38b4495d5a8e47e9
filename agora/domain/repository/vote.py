"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from agora.domain.model.vote import Vote
from agora.domain.value import AnswerId, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_answer_and_voter(
        self, answer_id: AnswerId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on an answer.

        Args:
            answer_id: ID of the answer
            voter_id: ID of the voting user

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The store enforces uniqueness of (answer_id, voter_id). Two
        concurrent saves for the same pair leave exactly one row; the
        loser raises.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for the pair
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if it no longer existed
        """
        pass

    @abstractmethod
    async def count_by_answer(self, answer_id: AnswerId) -> int:
        """Count votes on an answer.

        Args:
            answer_id: ID of the answer

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, int]:
        """Count votes on several answers in one query.

        Args:
            answer_ids: IDs of the answers

        Returns:
            Mapping of answer ID to vote count (0 for answers without votes)
        """
        pass

    @abstractmethod
    async def find_by_voter_and_answers(
        self, voter_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple answers (batch query).

        Args:
            voter_id: ID of the voting user
            answer_ids: IDs of the answers to check

        Returns:
            List of votes by the voter on the specified answers
        """
        pass
