"""Answer entity."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """An answer to a question.

    The responder is the only author of an answer and may not vote on it.
    """

    id: AnswerId
    question_id: QuestionId
    responder_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
