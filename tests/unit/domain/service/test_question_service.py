"""Unit tests for QuestionService and AnswerService."""

from datetime import datetime, timedelta

import pytest

from agora.domain.error import UnknownQuestionError
from agora.domain.repository import AnswerRepository, QuestionRepository
from agora.domain.service import AnswerService, QuestionService
from agora.domain.value import Subject
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestQuestionService:
    """Tests for QuestionService."""

    @pytest.mark.asyncio
    async def test_get_question_by_string_id(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        question = await question_service.save_question(
            make_question(make_user("0xABC"))
        )

        assert await question_service.get_question(str(question.id)) == question

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "question_id", ["not-a-uuid", "00000000-0000-0000-0000-000000000000"]
    )
    async def test_get_question_unknown(self, unit_env, question_id):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(UnknownQuestionError):
            await question_service.get_question(question_id)

    @pytest.mark.asyncio
    async def test_list_questions_newest_first_with_subject_filter(self, unit_env):
        """Listing is newest first and honors the subject filter and paging."""
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        asker = make_user("0xABC")
        now = datetime.now()

        for i, subject in enumerate(
            [Subject.MATH, Subject.PHYSICS, Subject.MATH, Subject.MATH]
        ):
            q = make_question(asker, content=f"Question {i}").model_copy(
                update={"subject": subject, "created_at": now + timedelta(minutes=i)}
            )
            await question_repo.save(q)

        everything = await question_service.list_questions(None, limit=10, offset=0)
        assert [q.content for q in everything] == [
            "Question 3",
            "Question 2",
            "Question 1",
            "Question 0",
        ]

        math_page = await question_service.list_questions(
            Subject.MATH, limit=2, offset=1
        )
        assert [q.content for q in math_page] == ["Question 2", "Question 0"]


class TestAnswerService:
    """Tests for AnswerService."""

    @pytest.mark.asyncio
    async def test_find_answer_malformed_id_is_none(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        assert await answer_service.find_answer("a1") is None

    @pytest.mark.asyncio
    async def test_list_answers_for_question(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("0xABC")
        question = make_question(asker)
        other_question = make_question(asker)
        first = await answer_repo.save(make_answer(question, make_user("0xDEF")))
        await answer_repo.save(make_answer(other_question, make_user("0xDEF")))

        answers = await answer_service.list_answers(question.id)

        assert answers == [first]
