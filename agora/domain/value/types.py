"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from agora.domain.value.common import RootValueObject


class Subject(str, Enum):
    """Subject a question is filed under.

    Each subject corresponds to one of the subject agents in the client.
    """

    MATH = "MATH"
    PHYSICS = "PHYSICS"
    CHEMISTRY = "CHEMISTRY"
    COMPUTER_SCIENCE = "COMPUTER_SCIENCE"


class WalletAddress(RootValueObject[str]):
    """External wallet identifier of an account.

    Issued by the wallet provider and treated as opaque. Surrounding
    whitespace is stripped; comparison is exact.
    """

    @field_validator("root")
    @classmethod
    def validate_wallet_address(cls, v: str) -> str:
        """Validate wallet address is not empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Wallet address must be 1-255 characters")
        return v
