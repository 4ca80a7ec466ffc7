"""
Tests for the proposal endpoints, including the end-to-end flows.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_proposal_service
from modules.proposals.exceptions import ProposalStorageError

from tests.conftest import create_test_token


def bearer(user_id: str, email: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_test_token(user_id=user_id, email=email)}"}


@pytest.fixture
def alice() -> dict[str, str]:
    return bearer("user-a", "alice@example.com")


@pytest.fixture
def bob() -> dict[str, str]:
    return bearer("user-b", "bob@example.com")


class TestListProposals:
    """Tests for GET /propostas"""

    def test_initially_empty(self, client, alice):
        response = client.get("/propostas", headers=alice)
        assert response.status_code == 200
        assert response.json() == []

    def test_newest_first(self, client, alice):
        client.post("/propostas", json={"title": "first", "data": {}}, headers=alice)
        client.post("/propostas", json={"title": "second", "data": {}}, headers=alice)

        titles = [p["title"] for p in client.get("/propostas", headers=alice).json()]

        assert titles == ["second", "first"]

    def test_storage_error(self, container, alice):
        """Storage failures should be 500."""
        app = create_app(container=container)
        mock_service = AsyncMock()
        mock_service.list_proposals.side_effect = ProposalStorageError(
            "Server error while fetching proposals."
        )
        app.dependency_overrides[get_proposal_service] = lambda: mock_service

        response = TestClient(app).get("/propostas", headers=alice)

        assert response.status_code == 500
        assert response.json() == {"error": "Server error while fetching proposals."}


class TestCreateProposal:
    """Tests for POST /propostas"""

    def test_create_then_list(self, client, alice):
        """A created proposal should show up in the owner's list."""
        response = client.post("/propostas", json={"title": "T", "data": {"k": 1}}, headers=alice)
        assert response.status_code == 201
        assert response.headers["content-type"].startswith("text/plain")

        proposals = client.get("/propostas", headers=alice).json()

        assert len(proposals) == 1
        assert proposals[0]["title"] == "T"
        assert proposals[0]["data"] == {"k": 1}
        assert proposals[0]["user_id"] == "user-a"

    def test_body_cannot_override_owner(self, client, proposal_repository, alice):
        """A user_id in the body should be ignored."""
        response = client.post(
            "/propostas",
            json={"title": "T", "data": {"k": 1}, "user_id": "user-b"},
            headers=alice,
        )
        assert response.status_code == 201
        assert [r["user_id"] for r in proposal_repository.rows] == ["user-a"]

    @pytest.mark.parametrize(
        "body",
        [
            {"data": {"k": 1}},
            {"title": "T"},
            {"title": "", "data": {"k": 1}},
            {},
        ],
    )
    def test_missing_fields(self, client, proposal_repository, alice, body):
        response = client.post("/propostas", json=body, headers=alice)
        assert response.status_code == 400
        assert proposal_repository.rows == []

    def test_storage_error(self, container, alice):
        app = create_app(container=container)
        mock_service = AsyncMock()
        mock_service.create_proposal.side_effect = ProposalStorageError(
            "Server error while saving proposal."
        )
        app.dependency_overrides[get_proposal_service] = lambda: mock_service

        response = TestClient(app).post(
            "/propostas", json={"title": "T", "data": {}}, headers=alice
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Server error while saving proposal."}


class TestIsolation:
    def test_cross_user_isolation(self, client, alice, bob):
        """B should never see A's proposals."""
        client.post("/propostas", json={"title": "T", "data": {"k": 1}}, headers=alice)

        assert client.get("/propostas", headers=bob).json() == []
        # Repeated listings stay consistent
        assert len(client.get("/propostas", headers=alice).json()) == 1
        assert client.get("/propostas", headers=bob).json() == []

    def test_every_listed_row_belongs_to_caller(self, client, alice, bob):
        for i in range(3):
            client.post("/propostas", json={"title": f"a{i}", "data": {}}, headers=alice)
            client.post("/propostas", json={"title": f"b{i}", "data": {}}, headers=bob)

        assert {p["user_id"] for p in client.get("/propostas", headers=alice).json()} == {"user-a"}
        assert {p["user_id"] for p in client.get("/propostas", headers=bob).json()} == {"user-b"}


class TestEndToEnd:
    def test_register_confirm_login_create_list(self, client, identity):
        """Full flow from registration to an owned proposal."""
        assert client.post(
            "/register", json={"email": "a@example.com", "password": "p1p1p1", "name": "Alice"}
        ).status_code == 201
        identity.confirm("a@example.com")
        login = client.post("/login", json={"email": "a@example.com", "password": "p1p1p1"}).json()
        headers = {"Authorization": f"Bearer {login['token']}"}

        assert client.get("/propostas", headers=headers).json() == []
        client.post("/propostas", json={"title": "T", "data": {"k": 1}}, headers=headers)

        proposals = client.get("/propostas", headers=headers).json()
        assert len(proposals) == 1
        assert proposals[0]["title"] == "T"
        assert proposals[0]["user_id"] == identity.user_id("a@example.com")
