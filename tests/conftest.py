"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.model import Answer, Question, User
from agora.domain.value import AnswerId, QuestionId, Subject, UserId, WalletAddress

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(wallet_address: str) -> User:
    """Build a user owning the given wallet."""
    return User(
        id=UserId(uuid4()),
        wallet_address=WalletAddress(wallet_address),
        created_at=datetime.now(),
    )


def make_question(asker: User, content: str = "What is a monad?") -> Question:
    """Build a math question asked by ``asker``."""
    return Question(
        id=QuestionId(uuid4()),
        asker_id=asker.id,
        subject=Subject.MATH,
        content=content,
        created_at=datetime.now(),
    )


def make_answer(
    question: Question, responder: User, content: str = "A monoid in endofunctors."
) -> Answer:
    """Build an answer to ``question`` written by ``responder``."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        responder_id=responder.id,
        content=content,
        created_at=datetime.now(),
    )
