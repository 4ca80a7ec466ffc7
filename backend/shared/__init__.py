"""
Shared infrastructure for Propostas backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory (anon and admin clients)
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, load_settings
from .database import AnonClient, AdminClient, create_anon_client, create_admin_client
from .exceptions import (
    PropostasError,
    ConfigurationError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "load_settings",
    "AnonClient",
    "AdminClient",
    "create_anon_client",
    "create_admin_client",
    "PropostasError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
