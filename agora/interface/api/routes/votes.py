"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import AliasChoices, BaseModel, Field

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteCountRequest,
    GetVoteCountResponse,
    GetVoteCountUseCase,
    RetractVoteRequest,
    RetractVoteResponse,
    RetractVoteUseCase,
)
from agora.domain.error import DomainError
from agora.interface.error import to_http_exception

router = APIRouter(prefix="/api", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote.

    All fields are optional at the schema level; presence is checked by
    the vote service so that missing fields yield InvalidRequest.
    """

    answer_id: str | None = Field(
        default=None, validation_alias=AliasChoices("answerId", "answer_id")
    )
    wallet_address: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "walletAddress", "voterIdentity", "wallet_address"
        ),
    )
    is_upvote: bool | None = Field(
        default=None, validation_alias=AliasChoices("isUpvote", "is_upvote")
    )


@router.post("/votes", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Cast a vote on an answer.

    Example:
        POST /api/votes
        {"answerId": "...", "walletAddress": "0xABC", "isUpvote": true}

        Response:
        {"message": "Vote created successfully"}

    Raises:
        HTTPException: 400 for missing fields, duplicate or self votes;
            404 for unknown voter or answer; 503 if the store is down
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                answer_id=request.answer_id,
                wallet_address=request.wallet_address,
                is_upvote=request.is_upvote,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/votes", response_model=RetractVoteResponse)
async def retract_vote(
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
    answer_id: str | None = Query(default=None, alias="answerId"),
    wallet_address: str | None = Query(default=None, alias="walletAddress"),
    voter_identity: str | None = Query(default=None, alias="voterIdentity"),
) -> RetractVoteResponse:
    """Retract a vote.

    The voter may be named by ``walletAddress`` or ``voterIdentity``, the
    same two names the cast body accepts.

    Example:
        DELETE /api/votes?answerId=...&voterIdentity=0xABC

    Raises:
        HTTPException: 400 for missing parameters; 404 for unknown voter
            or when there is no vote to retract
    """
    try:
        return await retract_vote_use_case.execute(
            RetractVoteRequest(
                answer_id=answer_id,
                wallet_address=wallet_address or voter_identity,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/answers/{answer_id}/votes", response_model=GetVoteCountResponse)
async def get_vote_count(
    answer_id: str,
    get_vote_count_use_case: FromDishka[GetVoteCountUseCase],
) -> GetVoteCountResponse:
    """Count the votes on an answer.

    Raises:
        HTTPException: 404 if the answer does not exist
    """
    try:
        return await get_vote_count_use_case.execute(
            GetVoteCountRequest(answer_id=answer_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
