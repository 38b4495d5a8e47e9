"""Unit tests for ListAnswersUseCase."""

import pytest

from agora.application.usecase.answer import ListAnswersRequest, ListAnswersUseCase
from agora.domain.error import UnknownQuestionError
from agora.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from agora.domain.service import VoteService
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListAnswersUseCase:
    """Tests for ListAnswersUseCase."""

    @pytest.mark.asyncio
    async def test_counts_and_viewer_flags(self, unit_env):
        """Each answer carries its vote count and the viewer's vote flag."""
        # Arrange
        use_case = await unit_env.get(ListAnswersUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        asker = await user_repo.save(make_user("0xABC"))
        responder = await user_repo.save(make_user("0xDEF"))
        question = await question_repo.save(make_question(asker))
        voted = await answer_repo.save(make_answer(question, responder, "First"))
        await answer_repo.save(make_answer(question, responder, "Second"))
        await vote_service.cast("0xABC", str(voted.id), True)

        # Act
        response = await use_case.execute(
            ListAnswersRequest(question_id=str(question.id), wallet_address="0xABC")
        )

        # Assert
        by_content = {a.content: a for a in response.answers}
        assert by_content["First"].vote_count == 1
        assert by_content["First"].has_voted is True
        assert by_content["Second"].vote_count == 0
        assert by_content["Second"].has_voted is False

    @pytest.mark.asyncio
    async def test_unknown_viewer_sees_no_votes_of_their_own(self, unit_env):
        use_case = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("0xABC")
        question = await question_repo.save(make_question(asker))
        await answer_repo.save(make_answer(question, asker))

        response = await use_case.execute(
            ListAnswersRequest(question_id=str(question.id), wallet_address="0x999")
        )

        assert [a.has_voted for a in response.answers] == [False]

    @pytest.mark.asyncio
    async def test_malformed_viewer_wallet_is_treated_as_unknown(self, unit_env):
        """An overlong viewer wallet is not an error; nothing is marked voted."""
        use_case = await unit_env.get(ListAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("0xABC")
        question = await question_repo.save(make_question(asker))
        await answer_repo.save(make_answer(question, asker))

        response = await use_case.execute(
            ListAnswersRequest(question_id=str(question.id), wallet_address="0x" * 200)
        )

        assert [a.has_voted for a in response.answers] == [False]

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        use_case = await unit_env.get(ListAnswersUseCase)

        with pytest.raises(UnknownQuestionError):
            await use_case.execute(ListAnswersRequest(question_id="missing"))
