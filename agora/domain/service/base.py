"""Base service class for domain services."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from agora.domain.error import StoreUnavailableError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def store_faults(operation: str) -> Iterator[None]:
    """Translate content store failures into StoreUnavailableError.

    Uniqueness and foreign key violations (IntegrityError) pass through
    so callers can map them to the conflict they represent.

    Args:
        operation: Name of the store operation, used in the error and logs
    """
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as e:
        logfire.error(
            "Content store failure",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StoreUnavailableError(operation) from e


def is_unique_violation(
    error: IntegrityError, constraint: str, columns: tuple[str, ...]
) -> bool:
    """Whether an IntegrityError came from the named unique constraint.

    PostgreSQL reports the constraint name; SQLite only lists the
    ``table.column`` names it covers.

    Args:
        error: Error raised by the insert
        constraint: Unique constraint name
        columns: Qualified columns of the constraint, e.g. ``("votes.answer_id",)``
    """
    cause = getattr(error.orig, "__cause__", None)
    if getattr(cause, "constraint_name", None) == constraint:
        return True

    message = str(error.orig)
    if constraint in message:
        return True
    return "UNIQUE constraint failed" in message and all(
        column in message for column in columns
    )
