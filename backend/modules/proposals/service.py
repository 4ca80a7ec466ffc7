"""
Proposals service implementation.

Owner IDs always come from the authenticated user; request bodies never
decide ownership.
"""

import logging
from typing import Any, Optional

from .exceptions import MissingProposalFieldsError
from .interfaces import IProposalRepository, IProposalService
from .models import Proposal

logger = logging.getLogger(__name__)


class ProposalService(IProposalService):
    """Proposal use cases on top of IProposalRepository."""

    def __init__(self, repository: IProposalRepository):
        self._repository = repository

    async def list_proposals(self, user_id: str) -> list[Proposal]:
        """Return the caller's proposals, newest first."""
        proposals = await self._repository.list_by_owner(user_id)
        # The query already filters by owner; never leak a foreign row.
        return [p for p in proposals if p.user_id == user_id]

    async def create_proposal(
        self, user_id: str, title: Optional[str], data: Any
    ) -> Proposal:
        """
        Create a proposal owned by user_id.

        Raises:
            MissingProposalFieldsError: If title or data is missing
            ProposalStorageError: On provider failure
        """
        missing = []
        if not title:
            missing.append("title")
        if data is None:
            missing.append("data")
        if missing:
            raise MissingProposalFieldsError(missing)

        proposal = await self._repository.insert(user_id, title, data)
        logger.info(f"User {user_id} created proposal {proposal.id}")
        return proposal
