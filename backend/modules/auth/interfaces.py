"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory fakes.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import IdentityUser, LoginResponse


@runtime_checkable
class IIdentityClient(Protocol):
    """
    Adapter over the external identity provider.

    Implementations raise module exceptions instead of returning
    provider-specific error objects.
    """

    async def sign_up(
        self, email: str, password: str, display_name: str
    ) -> IdentityUser:
        """
        Create an unconfirmed account.

        The provider dispatches the confirmation e-mail itself.

        Raises:
            RegistrationError: If the provider rejects the sign-up
        """
        ...

    async def sign_in_with_password(self, email: str, password: str) -> IdentityUser:
        """
        Verify credentials with the provider.

        Raises:
            EmailNotConfirmedError: If the account is still unconfirmed
            InvalidCredentialsError: For any other failure
        """
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Mints and verifies session tokens."""

    def mint(self, user: AuthenticatedUser) -> str:
        """Return a signed bearer token for the user."""
        ...

    def verify(self, token: str) -> AuthenticatedUser:
        """
        Decode a bearer token.

        Raises:
            InvalidTokenError: If the token is expired, malformed or mis-signed
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """Registration and login use cases."""

    async def register(self, email: str, password: str, name: str) -> IdentityUser:
        ...

    async def login(self, email: str, password: str) -> LoginResponse:
        ...
