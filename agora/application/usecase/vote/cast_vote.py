"""Cast vote use case."""

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.service import VoteService


class CastVoteRequest(BaseModel):
    """Cast vote request.

    Fields are optional here so that missing ones surface as an
    InvalidRequest domain error rather than a schema error.
    """

    answer_id: str | None = None
    wallet_address: str | None = None
    is_upvote: bool | None = None


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    message: str


class CastVoteUseCase(BaseUseCase):
    """Use case for casting a vote on an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Confirmation message

        Raises:
            DomainError: If any vote precondition fails
        """
        await self.vote_service.cast(
            voter_identity=request.wallet_address,
            answer_id=request.answer_id,
            is_upvote=request.is_upvote,
        )
        return CastVoteResponse(message="Vote created successfully")
