"""
Proposals module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, ValidationError


class MissingProposalFieldsError(ValidationError):
    """Raised when a proposal is submitted without title or data."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "Please provide title and data.",
            code="MISSING_PROPOSAL_FIELDS",
            details={"fields": fields},
        )


class ProposalStorageError(ExternalServiceError):
    """Raised when the database provider fails to read or write proposals."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="STORAGE_UNAVAILABLE",
            details={"original_error": original_error},
        )
