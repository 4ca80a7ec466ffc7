"""
Authentication module.

Handles delegated sign-up/sign-in, session token minting and validation.

Public API:
- IAuthService, IIdentityClient, ITokenService: Interfaces
- AuthService, IdentityClient, SessionTokenService: Implementations
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService, IIdentityClient, ITokenService
from .identity import IdentityClient
from .models import IdentityUser, SessionClaims, LoginResponse
from .service import AuthService
from .tokens import SessionTokenService
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    EmailNotConfirmedError,
    InvalidCredentialsError,
    MissingFieldsError,
    DomainNotPermittedError,
    RegistrationError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IIdentityClient",
    "ITokenService",
    # Implementations
    "AuthService",
    "IdentityClient",
    "SessionTokenService",
    # Models
    "IdentityUser",
    "SessionClaims",
    "LoginResponse",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "EmailNotConfirmedError",
    "InvalidCredentialsError",
    "MissingFieldsError",
    "DomainNotPermittedError",
    "RegistrationError",
]
