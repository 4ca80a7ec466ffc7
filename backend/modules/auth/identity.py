"""
Identity client backed by Supabase Auth.

Only ever holds the anon-key client: sign-up and sign-in are end-user
flows and must not run with service-role privileges.
"""

import logging
from typing import Any

import httpx
from supabase import AuthError

from shared.database import AnonClient

from .exceptions import (
    EmailNotConfirmedError,
    InvalidCredentialsError,
    RegistrationError,
)
from .interfaces import IIdentityClient
from .models import IdentityUser

logger = logging.getLogger(__name__)

# Supabase reports unconfirmed sign-ins with this code (newer releases)
# or this message (older releases).
EMAIL_NOT_CONFIRMED_CODE = "email_not_confirmed"
EMAIL_NOT_CONFIRMED_MESSAGE = "Email not confirmed"

# user_metadata key holding the display name
DISPLAY_NAME_KEY = "full_name"


def is_email_not_confirmed(error: AuthError) -> bool:
    """Check whether a provider error means the e-mail is unconfirmed."""
    return (
        getattr(error, "code", None) == EMAIL_NOT_CONFIRMED_CODE
        or getattr(error, "message", None) == EMAIL_NOT_CONFIRMED_MESSAGE
    )


def map_user(user: Any) -> IdentityUser:
    """Convert a Supabase user object into an IdentityUser."""
    metadata = getattr(user, "user_metadata", None) or {}
    return IdentityUser(
        id=str(user.id),
        email=user.email or "",
        display_name=metadata.get(DISPLAY_NAME_KEY),
    )


class IdentityClient(IIdentityClient):
    """Implementation of IIdentityClient over the Supabase Auth client."""

    def __init__(self, client: AnonClient):
        self._client = client

    async def sign_up(
        self, email: str, password: str, display_name: str
    ) -> IdentityUser:
        """Create the account and store the display name in user metadata."""
        try:
            response = await self._client.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {DISPLAY_NAME_KEY: display_name}},
                }
            )
        except AuthError as e:
            logger.error(f"Identity provider rejected sign-up for {email}: {e.message}")
            raise RegistrationError(e.message or "Error registering user.") from e
        except httpx.HTTPError as e:
            logger.error(f"Identity provider unreachable during sign-up for {email}: {e}")
            raise RegistrationError() from e

        if response.user is None:
            logger.error(f"Identity provider returned no user for sign-up of {email}")
            raise RegistrationError()

        return map_user(response.user)

    async def sign_in_with_password(self, email: str, password: str) -> IdentityUser:
        """Verify credentials, keeping only the unconfirmed-email distinction."""
        try:
            response = await self._client.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as e:
            if is_email_not_confirmed(e):
                raise EmailNotConfirmedError(email) from e
            logger.warning(f"Identity provider rejected sign-in for {email}: {e.message}")
            raise InvalidCredentialsError() from e
        except httpx.HTTPError as e:
            logger.error(f"Identity provider unreachable during sign-in for {email}: {e}")
            raise InvalidCredentialsError() from e

        if response.user is None:
            raise InvalidCredentialsError()

        return map_user(response.user)
