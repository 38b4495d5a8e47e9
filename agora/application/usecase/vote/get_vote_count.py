"""Get vote count use case."""

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, CamelModel
from agora.domain.service import VoteService


class GetVoteCountRequest(BaseModel):
    """Get vote count request."""

    answer_id: str


class GetVoteCountResponse(CamelModel):
    """Get vote count response."""

    answer_id: str
    vote_count: int


class GetVoteCountUseCase(BaseUseCase):
    """Use case for counting the votes on an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteCountRequest) -> GetVoteCountResponse:
        count = await self.vote_service.count_votes(request.answer_id)
        return GetVoteCountResponse(answer_id=request.answer_id, vote_count=count)
