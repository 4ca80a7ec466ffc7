"""
Proposal data models.

Field names mirror the columns of the `proposals` relation so that
list responses keep the shape the front-end already consumes.
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Proposal(BaseModel):
    """A stored proposal, owned by exactly one user."""

    id: Union[int, str] = Field(..., description="Database-assigned ID")
    user_id: str = Field(..., description="Owner's user ID")
    title: str = Field(..., description="Proposal title")
    data: Any = Field(None, description="Opaque structured payload")
    created_at: Optional[datetime] = Field(None, description="Server-assigned timestamp")


class CreateProposalRequest(BaseModel):
    """
    Body of POST /propostas.

    Unknown keys (including any `user_id`) are dropped: ownership always
    comes from the session token.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    data: Any = None
