"""Retract vote use case."""

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.service import VoteService


class RetractVoteRequest(BaseModel):
    """Retract vote request."""

    answer_id: str | None = None
    wallet_address: str | None = None


class RetractVoteResponse(CamelModel):
    """Retract vote response."""

    message: str


class RetractVoteUseCase(BaseUseCase):
    """Use case for retracting a vote from an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize retract vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RetractVoteRequest) -> RetractVoteResponse:
        """Execute retract vote flow.

        Raises:
            DomainError: If the voter is unknown or has no vote to retract
        """
        await self.vote_service.retract(
            voter_identity=request.wallet_address,
            answer_id=request.answer_id,
        )
        return RetractVoteResponse(message="Vote deleted successfully")
