"""User aggregate root.

Users are identified by the wallet they connect with. Registration and
wallet authentication happen outside this service.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import UserId, WalletAddress


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    wallet_address: WalletAddress
    created_at: datetime = Field(default_factory=datetime.now)
