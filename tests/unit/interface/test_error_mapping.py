"""Unit tests for domain error to HTTP mapping."""

import pytest

from agora.domain.error import (
    DuplicateVoteError,
    InvalidRequestError,
    SelfVoteForbiddenError,
    StoreUnavailableError,
    UnknownAnswerError,
    UnknownQuestionError,
    UnknownVoterError,
    VoteNotFoundError,
    WalletConflictError,
)
from agora.interface.error import to_http_exception


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (InvalidRequestError(["answerId"]), 400, "InvalidRequest"),
        (UnknownVoterError("0x999"), 404, "UnknownVoter"),
        (UnknownAnswerError("a1"), 404, "UnknownAnswer"),
        (UnknownQuestionError("q1"), 404, "UnknownQuestion"),
        (DuplicateVoteError(), 400, "DuplicateVote"),
        (SelfVoteForbiddenError(), 400, "SelfVoteForbidden"),
        (VoteNotFoundError("a1", "u1"), 404, "VoteNotFound"),
        (WalletConflictError("0xABC"), 409, "WalletConflict"),
        (StoreUnavailableError("insert_vote"), 503, "StoreUnavailable"),
    ],
)
def test_status_and_code(error, status_code, code):
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == {"code": code, "message": error.message}


def test_messages_shown_to_users():
    assert UnknownVoterError("0x999").message == (
        "User not found. Please connect your wallet first."
    )
    assert DuplicateVoteError().message == "User has already voted for the answer"
    assert SelfVoteForbiddenError().message == "User cannot vote on their own answer"
    assert InvalidRequestError(["answerId", "isUpvote"]).message == (
        "Missing required fields: answerId, isUpvote"
    )
