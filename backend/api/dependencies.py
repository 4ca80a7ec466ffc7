"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. One container is built per application from its
Settings and stored on app.state; nothing here is process-global.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings
from shared.database import (
    AdminClient,
    AnonClient,
    close_admin_client,
    close_anon_client,
    create_admin_client,
    create_anon_client,
)

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IIdentityClient, ITokenService
    from modules.proposals.interfaces import IProposalRepository, IProposalService


@dataclass
class ServiceContainer:
    """
    Container for all service instances.

    The identity client and the proposal repository hold the provider
    connection pools; they carry no per-request state and are shared by
    every request of the application.
    """

    settings: Settings
    identity: "IIdentityClient"
    proposal_repository: "IProposalRepository"
    tokens: "ITokenService"
    anon_client: Optional[AnonClient] = None
    admin_client: Optional[AdminClient] = None
    auth: "IAuthService" = field(init=False)
    proposals: "IProposalService" = field(init=False)

    def __post_init__(self) -> None:
        from modules.auth.service import AuthService
        from modules.proposals.service import ProposalService

        self.auth = AuthService(
            identity=self.identity,
            tokens=self.tokens,
            permitted_email_domain=self.settings.permitted_email_domain,
        )
        self.proposals = ProposalService(self.proposal_repository)

    async def aclose(self) -> None:
        """Release the provider clients this container owns."""
        if self.anon_client is not None:
            await close_anon_client(self.anon_client)
            self.anon_client = None
        if self.admin_client is not None:
            await close_admin_client(self.admin_client)
            self.admin_client = None


def build_token_service(settings: Settings) -> "ITokenService":
    """Create the session token service from settings."""
    from modules.auth.tokens import SessionTokenService

    return SessionTokenService(
        settings.token_secret,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )


async def build_container(settings: Settings) -> ServiceContainer:
    """
    Create the provider clients and wire every service.

    The anon client only reaches the identity client and the admin client
    only reaches the proposal repository.
    """
    from modules.auth.identity import IdentityClient
    from modules.proposals.repository import ProposalRepository

    anon_client = await create_anon_client(settings)
    admin_client = await create_admin_client(settings)

    return ServiceContainer(
        settings=settings,
        identity=IdentityClient(anon_client),
        proposal_repository=ProposalRepository(
            admin_client, data_as_text=settings.proposal_data_as_text
        ),
        tokens=build_token_service(settings),
        anon_client=anon_client,
        admin_client=admin_client,
    )


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's container."""
    return request.app.state.container


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_token_service(request: Request) -> "ITokenService":
    """FastAPI dependency for the session token service."""
    return get_container(request).tokens


def get_proposal_service(request: Request) -> "IProposalService":
    """FastAPI dependency for proposal service."""
    return get_container(request).proposals
