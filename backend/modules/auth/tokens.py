"""
Session token service.

Mints HS256 JWTs after a successful provider sign-in and verifies them
on protected routes. Tokens are stateless: there is no revocation list,
so a token stays valid until it expires.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.models import AuthenticatedUser

from .exceptions import InvalidTokenError
from .interfaces import ITokenService
from .models import SessionClaims

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=8)


class SessionTokenService(ITokenService):
    """Signs and verifies session tokens with a shared secret."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def mint(self, user: AuthenticatedUser) -> str:
        """
        Create a signed token for the user.

        Claims: id, name, email, iat, exp (exp = iat + ttl).
        """
        issued_at = int(self._clock().timestamp())
        payload = {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + int(self._ttl.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> AuthenticatedUser:
        """
        Decode and validate a token.

        Every failure raises the same InvalidTokenError so callers cannot
        tell an expired token from a forged one.
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
            claims = SessionClaims(**payload)
        except (jwt.InvalidTokenError, PydanticValidationError, TypeError):
            raise InvalidTokenError()

        return claims.to_user()
