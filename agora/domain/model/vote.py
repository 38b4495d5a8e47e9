"""Vote entity.

A vote records that a voter acted on an answer. The relation carries no
polarity; its existence is the only state.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import AnswerId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (answer, voter), enforced by a unique constraint
    - A voter may not vote on an answer they wrote
    - Never updated in place: created by a cast, removed by a retract
    """

    id: VoteId
    answer_id: AnswerId
    voter_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
