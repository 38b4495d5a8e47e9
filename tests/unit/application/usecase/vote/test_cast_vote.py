"""Unit tests for the vote use cases."""

import pytest

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteCountRequest,
    GetVoteCountUseCase,
    RetractVoteRequest,
    RetractVoteUseCase,
)
from agora.domain.error import InvalidRequestError, VoteNotFoundError
from agora.domain.repository import AnswerRepository, UserRepository
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_answer(env):
    user_repo = await env.get(UserRepository)
    answer_repo = await env.get(AnswerRepository)
    await user_repo.save(make_user("0xABC"))
    responder = await user_repo.save(make_user("0xDEF"))
    return await answer_repo.save(make_answer(make_question(responder), responder))


class TestVoteUseCases:
    """Cast, retract and count through the application layer."""

    @pytest.mark.asyncio
    async def test_cast_then_count_then_retract(self, unit_env):
        cast_use_case = await unit_env.get(CastVoteUseCase)
        retract_use_case = await unit_env.get(RetractVoteUseCase)
        count_use_case = await unit_env.get(GetVoteCountUseCase)
        answer = await seed_answer(unit_env)

        cast = await cast_use_case.execute(
            CastVoteRequest(
                answer_id=str(answer.id), wallet_address="0xABC", is_upvote=True
            )
        )
        assert cast.message == "Vote created successfully"

        count = await count_use_case.execute(
            GetVoteCountRequest(answer_id=str(answer.id))
        )
        assert count.vote_count == 1
        assert count.model_dump(by_alias=True) == {
            "answerId": str(answer.id),
            "voteCount": 1,
        }

        retract = await retract_use_case.execute(
            RetractVoteRequest(answer_id=str(answer.id), wallet_address="0xABC")
        )
        assert retract.message == "Vote deleted successfully"

        count = await count_use_case.execute(
            GetVoteCountRequest(answer_id=str(answer.id))
        )
        assert count.vote_count == 0

    @pytest.mark.asyncio
    async def test_cast_without_polarity_is_invalid(self, unit_env):
        cast_use_case = await unit_env.get(CastVoteUseCase)
        answer = await seed_answer(unit_env)

        with pytest.raises(InvalidRequestError, match="isUpvote"):
            await cast_use_case.execute(
                CastVoteRequest(answer_id=str(answer.id), wallet_address="0xABC")
            )

    @pytest.mark.asyncio
    async def test_retract_twice(self, unit_env):
        cast_use_case = await unit_env.get(CastVoteUseCase)
        retract_use_case = await unit_env.get(RetractVoteUseCase)
        answer = await seed_answer(unit_env)
        await cast_use_case.execute(
            CastVoteRequest(
                answer_id=str(answer.id), wallet_address="0xABC", is_upvote=True
            )
        )
        request = RetractVoteRequest(answer_id=str(answer.id), wallet_address="0xABC")

        await retract_use_case.execute(request)
        with pytest.raises(VoteNotFoundError):
            await retract_use_case.execute(request)
