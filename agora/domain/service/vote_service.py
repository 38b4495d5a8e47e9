"""Vote domain service.

Each (answer, voter) pair is either unvoted or voted. ``cast`` is the only
unvoted -> voted transition and ``retract`` the only voted -> unvoted one;
attempting either from the wrong state raises instead of doing nothing.
"""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import (
    DuplicateVoteError,
    InvalidRequestError,
    SelfVoteForbiddenError,
    UnknownAnswerError,
    UnknownVoterError,
    VoteNotFoundError,
)
from agora.domain.model import User
from agora.domain.model.vote import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import AnswerId, UserId, VoteId, WalletAddress

from .answer_service import AnswerService
from .base import Service, is_unique_violation, store_faults
from .user_service import UserService


_UNIQUE_VOTE = "uq_votes_answer_voter"
_UNIQUE_VOTE_COLUMNS = ("votes.answer_id", "votes.voter_id")


def _missing_fields(**fields: object) -> list[str]:
    """Names of fields that are None or blank strings."""
    missing = []
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.answer_service = answer_service
        self.user_service = user_service

    async def _resolve_voter(self, voter_identity: str) -> User:
        try:
            wallet_address = WalletAddress(voter_identity)
        except ValueError:
            # Not a well-formed address, so no account can own it
            raise UnknownVoterError(voter_identity)
        return await self.user_service.get_by_wallet_address(wallet_address)

    async def cast(
        self,
        voter_identity: str | None,
        answer_id: str | None,
        is_upvote: bool | None = True,
    ) -> Vote:
        """Cast a vote on an answer.

        Checks run in order and stop at the first failure:
        presence, voter, answer, duplicate, self-vote. Only then is
        a single vote row inserted.

        The duplicate check is advisory. Two concurrent casts may both pass
        it; the store's unique (answer_id, voter_id) constraint rejects the
        second insert, which is reported as a duplicate as well. Any other
        constraint failure on insert means the answer vanished in between
        and is reported as an unknown answer.

        Args:
            voter_identity: Wallet address of the voter
            answer_id: Answer UUID as string
            is_upvote: Requested polarity; required but not stored

        Returns:
            Created vote

        Raises:
            InvalidRequestError: If any input is missing
            UnknownVoterError: If the wallet has no account
            UnknownAnswerError: If the answer does not exist
            DuplicateVoteError: If the voter already voted on the answer
            SelfVoteForbiddenError: If the voter wrote the answer
            StoreUnavailableError: If the content store fails
        """
        missing = _missing_fields(
            answerId=answer_id, walletAddress=voter_identity, isUpvote=is_upvote
        )
        if missing:
            logfire.warn("Vote request missing fields", missing=missing)
            raise InvalidRequestError(missing)

        with logfire.span(
            "vote_service.cast",
            answer_id=answer_id,
            voter_identity=voter_identity,
            is_upvote=is_upvote,
        ):
            voter = await self._resolve_voter(voter_identity)

            answer = await self.answer_service.find_answer(answer_id)
            if not answer:
                raise UnknownAnswerError(answer_id)

            with store_faults("find_vote"):
                existing = await self.vote_repository.find_by_answer_and_voter(
                    answer.id, voter.id
                )
            if existing:
                logfire.warn(
                    "Duplicate vote attempt",
                    answer_id=str(answer.id),
                    voter_id=str(voter.id),
                )
                raise DuplicateVoteError()

            if answer.responder_id == voter.id:
                logfire.warn(
                    "Self-vote attempt",
                    answer_id=str(answer.id),
                    voter_id=str(voter.id),
                )
                raise SelfVoteForbiddenError()

            vote = Vote(
                id=VoteId(uuid4()),
                answer_id=answer.id,
                voter_id=voter.id,
                created_at=datetime.now(),
            )

            try:
                with store_faults("insert_vote"):
                    saved_vote = await self.vote_repository.save(vote)
            except IntegrityError as e:
                if not is_unique_violation(e, _UNIQUE_VOTE, _UNIQUE_VOTE_COLUMNS):
                    # The answer row went away after it was looked up
                    logfire.warn(
                        "Vote references a missing row",
                        answer_id=str(answer.id),
                        voter_id=str(voter.id),
                        error=str(e.orig),
                    )
                    raise UnknownAnswerError(answer_id) from e
                # Lost the race against a concurrent cast for the same pair
                logfire.warn(
                    "Duplicate vote rejected by store",
                    answer_id=str(answer.id),
                    voter_id=str(voter.id),
                )
                raise DuplicateVoteError()

            logfire.info(
                "Vote created",
                vote_id=str(saved_vote.id),
                answer_id=str(answer.id),
                voter_id=str(voter.id),
            )
            return saved_vote

    async def retract(
        self, voter_identity: str | None, answer_id: str | None
    ) -> Vote:
        """Retract a previously cast vote.

        Args:
            voter_identity: Wallet address of the voter
            answer_id: Answer UUID as string

        Returns:
            The deleted vote

        Raises:
            InvalidRequestError: If any input is missing
            UnknownVoterError: If the wallet has no account
            VoteNotFoundError: If the voter has no vote on the answer
            StoreUnavailableError: If the content store fails
        """
        missing = _missing_fields(answerId=answer_id, walletAddress=voter_identity)
        if missing:
            logfire.warn("Retract request missing fields", missing=missing)
            raise InvalidRequestError(missing)

        with logfire.span(
            "vote_service.retract",
            answer_id=answer_id,
            voter_identity=voter_identity,
        ):
            voter = await self._resolve_voter(voter_identity)

            try:
                parsed_answer_id = AnswerId(UUID(answer_id))
            except ValueError:
                logfire.warn("Malformed answer id on retract", answer_id=answer_id)
                raise VoteNotFoundError(answer_id, str(voter.id))

            with store_faults("find_vote"):
                vote = await self.vote_repository.find_by_answer_and_voter(
                    parsed_answer_id, voter.id
                )
            if not vote:
                logfire.info(
                    "No vote to retract", answer_id=answer_id, voter_id=str(voter.id)
                )
                raise VoteNotFoundError(answer_id, str(voter.id))

            with store_faults("delete_vote"):
                deleted = await self.vote_repository.delete(vote.id)
            if not deleted:
                # A concurrent retract removed it first
                raise VoteNotFoundError(answer_id, str(voter.id))

            logfire.info(
                "Vote retracted",
                vote_id=str(vote.id),
                answer_id=answer_id,
                voter_id=str(voter.id),
            )
            return vote

    async def count_votes(self, answer_id: str) -> int:
        """Count votes on an answer.

        Raises:
            UnknownAnswerError: If the answer does not exist
        """
        answer = await self.answer_service.find_answer(answer_id)
        if not answer:
            raise UnknownAnswerError(answer_id)
        with store_faults("count_votes"):
            return await self.vote_repository.count_by_answer(answer.id)

    async def count_votes_for_answers(
        self, answer_ids: list[AnswerId]
    ) -> dict[AnswerId, int]:
        """Vote counts for several answers at once."""
        if not answer_ids:
            return {}
        with store_faults("count_votes"):
            return await self.vote_repository.count_by_answers(answer_ids)

    async def get_user_votes_for_answers(
        self, voter_id: UserId, answer_ids: list[AnswerId]
    ) -> dict[AnswerId, bool]:
        """Check which answers a user has voted on.

        Args:
            voter_id: User ID
            answer_ids: List of answer IDs to check

        Returns:
            Dictionary mapping answer ID to whether the user has voted
        """
        if not answer_ids:
            return {}

        # Batch query to avoid N+1
        with store_faults("find_votes"):
            votes = await self.vote_repository.find_by_voter_and_answers(
                voter_id=voter_id, answer_ids=answer_ids
            )

        voted_ids = {vote.answer_id for vote in votes}
        return {aid: aid in voted_ids for aid in answer_ids}
