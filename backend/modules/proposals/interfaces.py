"""
Proposals module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import Proposal


@runtime_checkable
class IProposalRepository(Protocol):
    """Data access for the `proposals` relation."""

    async def list_by_owner(self, owner_id: str) -> list[Proposal]:
        """
        List an owner's proposals, newest first.

        Raises:
            ProposalStorageError: On provider failure
        """
        ...

    async def insert(self, owner_id: str, title: str, payload: Any) -> Proposal:
        """
        Store a new proposal owned by owner_id.

        Raises:
            ProposalStorageError: On provider failure
        """
        ...


@runtime_checkable
class IProposalService(Protocol):
    """Proposal use cases for an authenticated user."""

    async def list_proposals(self, user_id: str) -> list[Proposal]:
        ...

    async def create_proposal(
        self, user_id: str, title: Optional[str], data: Any
    ) -> Proposal:
        ...
