"""Question entity."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import QuestionId, Subject, UserId


class Question(DomainModel):
    """A question posted to the community by a user."""

    id: QuestionId
    asker_id: UserId
    subject: Subject
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
