"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class IdentityUser(BaseModel):
    """User record as returned by the identity provider."""

    id: str = Field(..., description="Provider user ID")
    email: str = Field(..., description="User's email")
    display_name: Optional[str] = Field(
        None, description="Value of user_metadata.full_name"
    )


class SessionClaims(BaseModel):
    """
    Decoded session token payload.

    Field names match the JWT claims minted by SessionTokenService.
    """

    id: str = Field(..., description="Provider user ID")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    def to_user(self) -> AuthenticatedUser:
        return AuthenticatedUser(id=self.id, name=self.name, email=self.email)


class RegisterRequest(BaseModel):
    """Body of POST /register. Presence is checked by the service."""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(BaseModel):
    """Body of POST /login."""

    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """Successful login: the session token and the user it describes."""

    token: str
    user: AuthenticatedUser
