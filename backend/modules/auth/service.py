"""
Authentication service implementation.

Registration and login use cases. Every precondition is checked before
the identity provider is called.
"""

import logging
from typing import Optional

from shared.models import AuthenticatedUser

from .exceptions import DomainNotPermittedError, MissingFieldsError
from .interfaces import IAuthService, IIdentityClient, ITokenService
from .models import IdentityUser, LoginResponse

logger = logging.getLogger(__name__)


def _missing(**fields: Optional[str]) -> list[str]:
    """Return the names of fields that are absent or empty."""
    return [name for name, value in fields.items() if not value]


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Delegates credential checks to the identity provider and issues
    this service's own session tokens.
    """

    def __init__(
        self,
        identity: IIdentityClient,
        tokens: ITokenService,
        permitted_email_domain: str,
    ):
        self._identity = identity
        self._tokens = tokens
        self._permitted_domain = permitted_email_domain

    def is_permitted_email(self, email: str) -> bool:
        """Check the e-mail against the permitted domain suffix."""
        return email.lower().endswith(self._permitted_domain.lower())

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str],
    ) -> IdentityUser:
        """
        Register a new, unconfirmed account.

        Raises:
            MissingFieldsError: If email, password or name is empty
            DomainNotPermittedError: If the e-mail is outside the permitted domain
            RegistrationError: If the provider rejects the sign-up
        """
        missing = _missing(email=email, password=password, name=name)
        if missing:
            raise MissingFieldsError("Please provide email, password and name.", missing)

        if not self.is_permitted_email(email):
            raise DomainNotPermittedError(self._permitted_domain)

        user = await self._identity.sign_up(email, password, name)
        logger.info(f"Registered user {user.id}, awaiting e-mail confirmation")
        return user

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> LoginResponse:
        """
        Verify credentials and issue a session token.

        Raises:
            MissingFieldsError: If email or password is empty
            EmailNotConfirmedError: If the account is unconfirmed
            InvalidCredentialsError: For any other sign-in failure
        """
        missing = _missing(email=email, password=password)
        if missing:
            raise MissingFieldsError("Please provide email and password.", missing)

        identity_user = await self._identity.sign_in_with_password(email, password)

        user = AuthenticatedUser(
            id=identity_user.id,
            name=identity_user.display_name,
            email=identity_user.email,
        )
        return LoginResponse(token=self._tokens.mint(user), user=user)
