"""
Propostas API package.

Provides the FastAPI application factory for the proposal backend.
"""

from .app import create_app

__all__ = ["create_app"]
