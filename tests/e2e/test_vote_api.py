"""End-to-end tests for the HTTP API on in-memory persistence."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from agora.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(container=build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def answer_id(client):
    """0xDEF answers a question asked by 0xABC; both wallets are connected."""
    for wallet in ("0xABC", "0xDEF"):
        response = client.post("/api/users", json={"walletAddress": wallet})
        assert response.status_code == 200

    question = client.post(
        "/api/questions",
        json={
            "walletAddress": "0xABC",
            "content": "Why is the sky blue?",
            "subject": "PHYSICS",
        },
    )
    assert question.status_code == 201
    question_id = question.json()["questionId"]

    answer = client.post(
        f"/api/questions/{question_id}/answers",
        json={"walletAddress": "0xDEF", "content": "Rayleigh scattering."},
    )
    assert answer.status_code == 201
    return answer.json()["answerId"]


def vote_count(client, answer_id):
    response = client.get(f"/api/answers/{answer_id}/votes")
    assert response.status_code == 200
    return response.json()["voteCount"]


class TestVoteEndpoints:
    """Tests for POST/DELETE /api/votes."""

    def test_vote_lifecycle(self, client, answer_id):
        """Cast, duplicate, retract, retract again."""
        body = {"answerId": answer_id, "walletAddress": "0xABC", "isUpvote": True}

        response = client.post("/api/votes", json=body)
        assert response.status_code == 200
        assert response.json() == {"message": "Vote created successfully"}
        assert vote_count(client, answer_id) == 1

        response = client.post("/api/votes", json=body)
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "DuplicateVote"
        assert vote_count(client, answer_id) == 1

        params = {"answerId": answer_id, "walletAddress": "0xABC"}
        response = client.delete("/api/votes", params=params)
        assert response.status_code == 200
        assert response.json() == {"message": "Vote deleted successfully"}
        assert vote_count(client, answer_id) == 0

        response = client.delete("/api/votes", params=params)
        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "VoteNotFound"

    def test_voter_identity_alias(self, client, answer_id):
        response = client.post(
            "/api/votes",
            json={"answerId": answer_id, "voterIdentity": "0xABC", "isUpvote": False},
        )

        assert response.status_code == 200
        assert vote_count(client, answer_id) == 1

    def test_retract_with_voter_identity(self, client, answer_id):
        """A vote cast under voterIdentity can be retracted under the same name."""
        client.post(
            "/api/votes",
            json={"answerId": answer_id, "voterIdentity": "0xABC", "isUpvote": True},
        )

        response = client.delete(
            "/api/votes", params={"answerId": answer_id, "voterIdentity": "0xABC"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Vote deleted successfully"}
        assert vote_count(client, answer_id) == 0

    def test_self_vote(self, client, answer_id):
        response = client.post(
            "/api/votes",
            json={"answerId": answer_id, "walletAddress": "0xDEF", "isUpvote": True},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == {
            "code": "SelfVoteForbidden",
            "message": "User cannot vote on their own answer",
        }
        assert vote_count(client, answer_id) == 0

    def test_unknown_voter(self, client, answer_id):
        response = client.post(
            "/api/votes",
            json={"answerId": answer_id, "walletAddress": "0x999", "isUpvote": True},
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "UnknownVoter"

    @pytest.mark.parametrize(
        "bad_answer_id", ["a1", "00000000-0000-0000-0000-000000000000"]
    )
    def test_unknown_answer(self, client, answer_id, bad_answer_id):
        response = client.post(
            "/api/votes",
            json={
                "answerId": bad_answer_id,
                "walletAddress": "0xABC",
                "isUpvote": True,
            },
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "UnknownAnswer"

    @pytest.mark.parametrize(
        "body",
        [
            {"walletAddress": "0xABC", "isUpvote": True},
            {"answerId": "x", "isUpvote": True},
            {"answerId": "x", "walletAddress": "0xABC"},
            {},
        ],
    )
    def test_missing_fields(self, client, body):
        response = client.post("/api/votes", json=body)

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "InvalidRequest"

    def test_retract_missing_params(self, client):
        response = client.delete("/api/votes", params={"walletAddress": "0xABC"})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "InvalidRequest"

    def test_retract_unknown_voter(self, client, answer_id):
        response = client.delete(
            "/api/votes", params={"answerId": answer_id, "walletAddress": "0x999"}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "UnknownVoter"

    def test_malformed_json_body_is_invalid_request(self, client):
        response = client.post(
            "/api/votes",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "InvalidRequest"


class TestBoardEndpoints:
    """Tests for users, questions and answers."""

    def test_connect_is_idempotent(self, client):
        first = client.post("/api/users", json={"walletAddress": "0xABC"}).json()
        second = client.post("/api/users", json={"walletAddress": "0xABC"}).json()

        assert first["created"] is True
        assert second["created"] is False
        assert second["userId"] == first["userId"]

    def test_connect_without_wallet(self, client):
        response = client.post("/api/users", json={})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "InvalidRequest"

    def test_get_unknown_user(self, client):
        response = client.get("/api/users/0x999")

        assert response.status_code == 404
        assert response.json()["detail"]["message"] == (
            "User not found. Please connect your wallet first."
        )

    def test_question_by_unknown_wallet(self, client):
        response = client.post(
            "/api/questions",
            json={"walletAddress": "0x999", "content": "Hello?", "subject": "MATH"},
        )

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "UnknownVoter"

    def test_list_questions_by_subject(self, client, answer_id):
        physics = client.get("/api/questions", params={"subject": "PHYSICS"}).json()
        math = client.get("/api/questions", params={"subject": "MATH"}).json()

        assert [q["content"] for q in physics["questions"]] == ["Why is the sky blue?"]
        assert physics["limit"] == 30
        assert math["questions"] == []

    def test_get_unknown_question(self, client):
        response = client.get(f"/api/questions/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "UnknownQuestion"

    def test_answers_report_votes(self, client, answer_id):
        client.post(
            "/api/votes",
            json={"answerId": answer_id, "walletAddress": "0xABC", "isUpvote": True},
        )
        question_id = client.get("/api/questions").json()["questions"][0]["questionId"]

        answers = client.get(
            f"/api/questions/{question_id}/answers",
            params={"walletAddress": "0xABC"},
        ).json()["answers"]

        assert answers[0]["answerId"] == answer_id
        assert answers[0]["voteCount"] == 1
        assert answers[0]["hasVoted"] is True

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "gitSha" in response.json()
