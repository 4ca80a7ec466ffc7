"""
Proposal repository for database access.

Encapsulates the Supabase queries against the `proposals` relation.
Runs with the admin client: ownership filtering is enforced here and in
the service layer, not by row-level security.
"""

import json
import logging
from typing import Any

import httpx
from supabase import PostgrestAPIError

from shared.database import AdminClient
from shared.repository import BaseRepository

from .exceptions import ProposalStorageError
from .models import Proposal

logger = logging.getLogger(__name__)

TABLE = "proposals"


class ProposalRepository(BaseRepository[Proposal]):
    """
    Repository for proposal data access.

    All methods return Pydantic models mapped from database rows.
    Provider and transport failures are raised as ProposalStorageError.
    """

    def __init__(self, db: AdminClient, data_as_text: bool = False) -> None:
        """
        Args:
            db: Service-role Supabase client.
            data_as_text: Serialize the payload to a JSON string on write and
                decode it on read, for a text-typed `data` column.
        """
        super().__init__(db)
        self._data_as_text = data_as_text

    async def list_by_owner(self, owner_id: str) -> list[Proposal]:
        """List the owner's proposals ordered by created_at, newest first."""
        try:
            result = await (
                self._db.table(TABLE)
                .select("*")
                .eq("user_id", owner_id)
                .order("created_at", desc=True)
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error(f"Failed to list proposals for user {owner_id}: {e}")
            raise ProposalStorageError(
                "Server error while fetching proposals.", original_error=str(e)
            ) from e

        return [self._map_to_proposal(row) for row in result.data]

    async def insert(self, owner_id: str, title: str, payload: Any) -> Proposal:
        """Insert a proposal owned by owner_id and return the stored row."""
        row = {
            "user_id": owner_id,
            "title": title,
            "data": self._encode(payload),
        }
        try:
            result = await self._db.table(TABLE).insert(row).execute()
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error(f"Failed to save proposal for user {owner_id}: {e}")
            raise ProposalStorageError(
                "Server error while saving proposal.", original_error=str(e)
            ) from e

        if not result.data:
            raise ProposalStorageError("Server error while saving proposal.")

        return self._map_to_proposal(result.data[0])

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _encode(self, payload: Any) -> Any:
        # Strings are encoded too; _decode json.loads every text-mode value.
        if self._data_as_text:
            return json.dumps(payload)
        return payload

    def _decode(self, value: Any) -> Any:
        if self._data_as_text and isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                # rows written before text-mode encoding
                return value
        return value

    def _map_to_proposal(self, row: dict[str, Any]) -> Proposal:
        return Proposal(
            id=row["id"],
            user_id=str(row["user_id"]),
            title=row.get("title") or "",
            data=self._decode(row.get("data")),
            created_at=row.get("created_at"),
        )
