"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from the session token claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID assigned by the identity provider")
    name: Optional[str] = Field(None, description="Display name captured at registration")
    email: str = Field(..., description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore iat/exp from the token
    }
