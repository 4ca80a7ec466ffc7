"""
Proposals module.

Owner-scoped proposal storage on the provider database.

Public API:
- IProposalService, IProposalRepository: Interfaces
- ProposalService, ProposalRepository: Implementations
- Proposal, CreateProposalRequest: Models
"""

from .interfaces import IProposalRepository, IProposalService
from .models import Proposal, CreateProposalRequest
from .repository import ProposalRepository
from .service import ProposalService
from .exceptions import MissingProposalFieldsError, ProposalStorageError

__all__ = [
    "IProposalRepository",
    "IProposalService",
    "Proposal",
    "CreateProposalRequest",
    "ProposalRepository",
    "ProposalService",
    "MissingProposalFieldsError",
    "ProposalStorageError",
]
