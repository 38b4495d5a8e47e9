"""Interface layer errors.

Translates domain errors into HTTP errors with a stable body:
``{"detail": {"code": ..., "message": ...}}``.
"""

from fastapi import HTTPException, status

from agora.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
    WalletConflictError,
)

# Checked in order; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (WalletConflictError, status.HTTP_409_CONFLICT),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]

INVALID_REQUEST = "InvalidRequest"


def error_detail(code: str, message: str) -> dict[str, str]:
    """Build the error body shared by all routes."""
    return {"code": code, "message": message}


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error to an HTTPException."""
    return HTTPException(
        status_code=status_for(error),
        detail=error_detail(error.code, error.message),
    )


def invalid_request(message: str) -> HTTPException:
    """HTTPException for input that failed value validation."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error_detail(INVALID_REQUEST, message),
    )
