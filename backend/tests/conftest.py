"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stand-ins for the identity provider and the proposals relation,
settings, and session token helpers.
"""

import itertools
from datetime import datetime, timezone, timedelta
from typing import Any, Optional

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, build_token_service
from modules.auth.exceptions import (
    EmailNotConfirmedError,
    InvalidCredentialsError,
    RegistrationError,
)
from modules.auth.models import IdentityUser
from modules.proposals.models import Proposal
from shared.config import Settings


# Test token secret (only for testing)
TEST_TOKEN_SECRET = "test-secret-key-for-testing-only"
TEST_DOMAIN = "@example.com"


def make_settings(**overrides: Any) -> Settings:
    """Build Settings without reading a .env file."""
    values = {
        "identity_url": "https://test.supabase.co",
        "identity_anon_key": "test-anon-key",
        "identity_admin_key": "test-admin-key",
        "token_secret": TEST_TOKEN_SECRET,
        "permitted_email_domain": TEST_DOMAIN,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    name: Optional[str] = "Test User",
    expired: bool = False,
    secret: str = TEST_TOKEN_SECRET,
) -> str:
    """
    Create a session token the way the login endpoint does.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        name: Display name to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    issued = now - timedelta(hours=9) if expired else now
    payload = {
        "id": user_id,
        "name": name,
        "email": email,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(hours=8)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class FakeIdentityClient:
    """In-memory identity provider with e-mail confirmation."""

    def __init__(self) -> None:
        self._accounts: dict[str, dict[str, Any]] = {}
        self._ids = itertools.count(1)
        self.sign_up_calls: list[tuple[str, str, str]] = []
        self.sign_in_calls: list[tuple[str, str]] = []

    async def sign_up(self, email: str, password: str, display_name: str) -> IdentityUser:
        self.sign_up_calls.append((email, password, display_name))
        if email in self._accounts:
            raise RegistrationError("User already registered")
        account = {
            "id": f"user-{next(self._ids)}",
            "password": password,
            "display_name": display_name,
            "confirmed": False,
        }
        self._accounts[email] = account
        return IdentityUser(id=account["id"], email=email, display_name=display_name)

    async def sign_in_with_password(self, email: str, password: str) -> IdentityUser:
        self.sign_in_calls.append((email, password))
        account = self._accounts.get(email)
        if account is None or account["password"] != password:
            raise InvalidCredentialsError()
        if not account["confirmed"]:
            raise EmailNotConfirmedError(email)
        return IdentityUser(
            id=account["id"], email=email, display_name=account["display_name"]
        )

    def confirm(self, email: str) -> None:
        """Simulate the user clicking the confirmation link."""
        self._accounts[email]["confirmed"] = True

    def user_id(self, email: str) -> str:
        return self._accounts[email]["id"]


class FakeProposalRepository:
    """In-memory `proposals` relation."""

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self._ids = itertools.count(1)
        self._base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async def list_by_owner(self, owner_id: str) -> list[Proposal]:
        rows = [r for r in self.rows if r["user_id"] == owner_id]
        rows.sort(key=lambda r: r["created_at"], reverse=True)
        return [Proposal(**r) for r in rows]

    async def insert(self, owner_id: str, title: str, payload: Any) -> Proposal:
        row_id = next(self._ids)
        row = {
            "id": row_id,
            "user_id": owner_id,
            "title": title,
            "data": payload,
            "created_at": self._base_time + timedelta(minutes=row_id),
        }
        self.rows.append(row)
        return Proposal(**row)


@pytest.fixture
def settings() -> Settings:
    """Provide test settings."""
    return make_settings()


@pytest.fixture
def identity() -> FakeIdentityClient:
    return FakeIdentityClient()


@pytest.fixture
def proposal_repository() -> FakeProposalRepository:
    return FakeProposalRepository()


@pytest.fixture
def container(settings, identity, proposal_repository) -> ServiceContainer:
    """Wire the real services on top of the in-memory providers."""
    return ServiceContainer(
        settings=settings,
        identity=identity,
        proposal_repository=proposal_repository,
        tokens=build_token_service(settings),
    )


@pytest.fixture
def app(container):
    """Create a fresh app for each test."""
    return create_app(container=container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
