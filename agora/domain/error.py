"""Domain layer errors.

Every error carries a stable ``code`` that callers can match on; the
message is meant to be shown to the user verbatim.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "DomainError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    code = "InvalidRequest"


class InvalidRequestError(ValidationError):
    """Raised when required request fields are missing or empty."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(missing)}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "NotFound"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnknownVoterError(NotFoundError):
    """Raised when a wallet address does not belong to a known account."""

    code = "UnknownVoter"

    def __init__(self, wallet_address: str):
        self.resource = "User"
        self.identifier = wallet_address
        DomainError.__init__(
            self, "User not found. Please connect your wallet first."
        )


class UnknownAnswerError(NotFoundError):
    """Raised when an answer id does not resolve to an answer."""

    code = "UnknownAnswer"

    def __init__(self, answer_id: str):
        super().__init__("Answer", answer_id)


class UnknownQuestionError(NotFoundError):
    """Raised when a question id does not resolve to a question."""

    code = "UnknownQuestion"

    def __init__(self, question_id: str):
        super().__init__("Question", question_id)


class VoteNotFoundError(NotFoundError):
    """Raised when retracting a vote that was never cast."""

    code = "VoteNotFound"

    def __init__(self, answer_id: str, voter_id: str):
        self.resource = "Vote"
        self.identifier = f"{answer_id}/{voter_id}"
        DomainError.__init__(self, "Vote not found")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    code = "BusinessRuleViolation"


class DuplicateVoteError(BusinessRuleViolationError):
    """Raised when the voter already has a vote on the answer."""

    code = "DuplicateVote"

    def __init__(self) -> None:
        super().__init__("User has already voted for the answer")


class SelfVoteForbiddenError(BusinessRuleViolationError):
    """Raised when the voter wrote the answer they are voting on."""

    code = "SelfVoteForbidden"

    def __init__(self) -> None:
        super().__init__("User cannot vote on their own answer")


class WalletConflictError(BusinessRuleViolationError):
    """Raised when two requests register the same wallet at once."""

    code = "WalletConflict"

    def __init__(self, wallet_address: str):
        self.wallet_address = wallet_address
        super().__init__("Wallet is being registered by another request, retry")


class StoreUnavailableError(DomainError):
    """Raised when the content store fails for reasons other than a conflict."""

    code = "StoreUnavailable"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Content store unavailable during {operation}")
