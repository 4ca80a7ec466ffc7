"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access.
"""

from typing import TypeVar, Generic

from .database import AdminClient


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - privileged Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class ProposalRepository(BaseRepository[Proposal]):
            async def list_by_owner(self, owner_id: str) -> list[Proposal]:
                result = await self._db.table("proposals").select("*").eq("user_id", owner_id).execute()
                return [self._map_to_proposal(row) for row in result.data]
    """

    def __init__(self, db: AdminClient) -> None:
        """
        Initialize the repository with the admin Supabase client.

        Args:
            db: Service-role client instance for database operations.
        """
        self._db = db
